from rest_framework import serializers

from HR.person.models import EliminacionSolicitud
from HR.person.models.eliminacion import MOTIVO_MAX_LENGTH


class EliminacionSolicitudSerializer(serializers.ModelSerializer):
    id_persona = serializers.IntegerField(source='persona_id', read_only=True)
    persona_nombre = serializers.CharField(source='persona.full_name', read_only=True)
    solicitado_por = serializers.IntegerField(source='solicitado_por_id', read_only=True)

    class Meta:
        model = EliminacionSolicitud
        fields = [
            'id', 'tipo', 'objetivo_id', 'id_persona', 'persona_nombre',
            'motivo', 'estado', 'solicitado_por', 'creado_en'
        ]


class SolicitarEliminacionSerializer(serializers.Serializer):
    motivo = serializers.CharField(
        max_length=MOTIVO_MAX_LENGTH, required=False, allow_blank=True, allow_null=True,
        error_messages={'max_length': f'Máximo {MOTIVO_MAX_LENGTH} caracteres'}
    )
