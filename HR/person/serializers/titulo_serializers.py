"""
Serializers for Titulo
"""
from rest_framework import serializers

from HR.person.dtos import TituloCreateDTO
from HR.person.models import Titulo
from .documento_serializers import EstadoCampoMixin


class TituloSerializer(serializers.ModelSerializer):
    """Read serializer for Titulo"""
    id_titulo = serializers.IntegerField(source='id', read_only=True)
    id_persona = serializers.IntegerField(source='persona_id', read_only=True)
    id_tipo_titulo = serializers.IntegerField(source='tipo_titulo_id', read_only=True)
    tipo_titulo_nombre = serializers.CharField(source='tipo_titulo.nombre', read_only=True)
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
        model = Titulo
        fields = [
            'id', 'id_titulo', 'id_persona', 'id_tipo_titulo', 'tipo_titulo_nombre',
            'nombre_titulo', 'institucion', 'fecha_emision', 'matricula_prof',
            'id_archivo', 'archivo_nombre', 'subido_por',
            'id_estado_verificacion', 'estado_codigo', 'estado_nombre', 'observacion',
            'creado_en', 'verificado_por', 'verificado_en'
        ]


class TituloCreateSerializer(EstadoCampoMixin, serializers.Serializer):
    """Write serializer for creating (or re-submitting) a title"""
    id_persona = serializers.IntegerField()
    id_tipo_titulo = serializers.IntegerField(error_messages={'required': 'El tipo de título es obligatorio'})
    nombre_titulo = serializers.CharField(max_length=255, error_messages={
        'required': 'El nombre del título es obligatorio',
        'blank': 'El nombre del título es obligatorio',
    })
    institucion = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True, default='')
    fecha_emision = serializers.DateField(required=False, allow_null=True)
    matricula_prof = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True, default='')
    id_archivo = serializers.IntegerField(required=False, allow_null=True)
    id_estado_verificacion = serializers.CharField(max_length=20, required=False, allow_null=True, allow_blank=True)
    observacion = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')

    def to_dto(self):
        data = dict(self.validated_data)
        return TituloCreateDTO(persona_id=data.pop('id_persona'), **data)
