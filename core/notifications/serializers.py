from rest_framework import serializers
from .models import Notificacion


class NotificacionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Notificacion
        fields = ['id', 'tipo', 'mensaje', 'link', 'observacion', 'nivel', 'meta', 'leida', 'creado_en']
        read_only_fields = fields
