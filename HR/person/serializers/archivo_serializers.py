from rest_framework import serializers

from HR.person.models import Archivo


class ArchivoSerializer(serializers.ModelSerializer):
    id_archivo = serializers.IntegerField(source='id', read_only=True)
    id_persona = serializers.IntegerField(source='persona_id', read_only=True)
    subido_por = serializers.IntegerField(source='subido_por_id', read_only=True)

    class Meta:
        model = Archivo
        fields = [
            'id', 'id_archivo', 'id_persona', 'nombre_original', 'content_type',
            'size_bytes', 'sha256_hex', 'subido_por', 'subido_en'
        ]


class ArchivoUploadSerializer(serializers.Serializer):
    archivo = serializers.FileField(error_messages={'required': 'Archivo requerido'})
