"""
Serializers for PersonaDocumento
"""
from rest_framework import serializers

from HR.person.dtos import DocumentoCreateDTO, CambioEstadoDTO
from HR.person.models import PersonaDocumento


class EstadoCampoMixin:
    """Accept the estado as id or codigo."""

    def validate_id_estado_verificacion(self, value):
        if value in (None, ''):
            return None
        return str(value).strip()


class PersonaDocumentoSerializer(serializers.ModelSerializer):
    """Read serializer for PersonaDocumento"""
    id_persona_doc = serializers.IntegerField(source='id', read_only=True)
    id_persona = serializers.IntegerField(source='persona_id', read_only=True)
    id_tipo_doc = serializers.IntegerField(source='tipo_doc_id', read_only=True)
    tipo_codigo = serializers.CharField(source='tipo_doc.codigo', read_only=True)
    tipo_nombre = serializers.CharField(source='tipo_doc.nombre', read_only=True)
    id_archivo = serializers.IntegerField(source='archivo_id', read_only=True)
    archivo_nombre = serializers.CharField(source='archivo.nombre_original', read_only=True, default=None)
    subido_por = serializers.IntegerField(source='archivo.subido_por_id', read_only=True, default=None)
    id_estado_verificacion = serializers.IntegerField(source='estado_verificacion_id', read_only=True)
    estado_codigo = serializers.CharField(source='estado_verificacion.codigo', read_only=True)
    estado_nombre = serializers.CharField(source='estado_verificacion.nombre', read_only=True)
    observacion = serializers.CharField(read_only=True)
    creado_en = serializers.DateTimeField(source='created_at', read_only=True)
    verificado_por = serializers.IntegerField(source='verificado_por_id', read_only=True)

    class Meta:
        model = PersonaDocumento
        fields = [
            'id', 'id_persona_doc', 'id_persona', 'id_tipo_doc', 'tipo_codigo', 'tipo_nombre',
            'id_archivo', 'archivo_nombre', 'subido_por',
            'id_estado_verificacion', 'estado_codigo', 'estado_nombre', 'observacion',
            'vigente', 'creado_en', 'verificado_por', 'verificado_en'
        ]


class PersonaDocumentoCreateSerializer(EstadoCampoMixin, serializers.Serializer):
    """Write serializer for creating a document. id_tipo_doc may be an id or a codigo."""
    id_tipo_doc = serializers.CharField(max_length=20)
    id_archivo = serializers.IntegerField(required=False, allow_null=True)
    id_estado_verificacion = serializers.CharField(max_length=20, required=False, allow_null=True, allow_blank=True)
    observacion = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')
    vigente = serializers.BooleanField(default=True)

    def to_dto(self, persona_id):
        return DocumentoCreateDTO(persona_id=persona_id, **self.validated_data)


class CambioEstadoSerializer(serializers.Serializer):
    """State change of a document or title."""
    id_estado_verificacion = serializers.CharField(max_length=20, error_messages={
        'required': 'Estado requerido',
        'blank': 'Estado requerido',
    })
    observacion = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')

    def to_dto(self, entity_id):
        return CambioEstadoDTO(entity_id=entity_id, **self.validated_data)
