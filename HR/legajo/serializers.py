from rest_framework import serializers

from .dtos import EstadoManualDTO, PlazoGraciaDTO
from .models import EstadoLegajoCodigo, LegajoHistorial, PlazoGracia


class EstadoManualSerializer(serializers.Serializer):
    codigo = serializers.CharField(max_length=20, error_messages={
        'required': 'codigo requerido',
        'blank': 'codigo requerido',
    })

    def validate_codigo(self, value):
        codigo = value.strip().upper()
        if codigo not in EstadoLegajoCodigo.values:
            raise serializers.ValidationError('Estado de legajo inválido')
        return codigo

    def to_dto(self, persona_id):
        return EstadoManualDTO(persona_id=persona_id, **self.validated_data)


class PlazoGraciaCreateSerializer(serializers.Serializer):
    fecha_limite = serializers.DateField(error_messages={
        'required': 'fecha_limite requerida (YYYY-MM-DD)',
        'null': 'fecha_limite requerida (YYYY-MM-DD)',
        'invalid': 'fecha_limite requerida (YYYY-MM-DD)',
    })
    motivo = serializers.CharField(max_length=300, required=False, allow_blank=True, allow_null=True)

    def to_dto(self, persona_id):
        return PlazoGraciaDTO(persona_id=persona_id, **self.validated_data)


class PlazoGraciaSerializer(serializers.ModelSerializer):
    id_persona = serializers.IntegerField(source='persona_id', read_only=True)

    class Meta:
        model = PlazoGracia
        fields = ['id', 'id_persona', 'fecha_limite', 'motivo', 'activo', 'creado_en']


class LegajoHistorialSerializer(serializers.ModelSerializer):
    codigo = serializers.CharField(source='estado.codigo', read_only=True)
    nombre = serializers.CharField(source='estado.nombre', read_only=True)
    cambiado_por = serializers.IntegerField(source='cambiado_por_id', read_only=True)

    class Meta:
        model = LegajoHistorial
        fields = ['id', 'codigo', 'nombre', 'motivo', 'cambiado_por', 'cambiado_en']
