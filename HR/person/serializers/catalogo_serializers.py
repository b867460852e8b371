"""
Serializers for read-only catalogues (estados, tipos, departamentos, localidades)
"""
from rest_framework import serializers

from HR.person.models import (
    DomDepartamento,
    DomLocalidad,
    EstadoVerificacion,
    TipoDocumento,
    TipoTitulo,
)


class EstadoVerificacionSerializer(serializers.ModelSerializer):
    id_estado = serializers.IntegerField(source='id', read_only=True)
    requiere_observacion = serializers.BooleanField(read_only=True)

    class Meta:
        model = EstadoVerificacion
        fields = ['id', 'id_estado', 'codigo', 'nombre', 'requiere_observacion']


class TipoDocumentoSerializer(serializers.ModelSerializer):
    id_tipo_doc = serializers.IntegerField(source='id', read_only=True)
    obligatorio = serializers.BooleanField(read_only=True)

    class Meta:
        model = TipoDocumento
        fields = ['id', 'id_tipo_doc', 'codigo', 'nombre', 'obligatorio']


class TipoTituloSerializer(serializers.ModelSerializer):
    id_tipo_titulo = serializers.IntegerField(source='id', read_only=True)

    class Meta:
        model = TipoTitulo
        fields = ['id', 'id_tipo_titulo', 'codigo', 'nombre']


class DomDepartamentoSerializer(serializers.ModelSerializer):
    id_dom_departamento = serializers.IntegerField(source='id', read_only=True)

    class Meta:
        model = DomDepartamento
        fields = ['id', 'id_dom_departamento', 'departamento']


class DomLocalidadSerializer(serializers.ModelSerializer):
    id_dom_localidad = serializers.IntegerField(source='id', read_only=True)
    id_dom_departamento = serializers.IntegerField(source='departamento_id', read_only=True)

    class Meta:
        model = DomLocalidad
        fields = ['id', 'id_dom_localidad', 'id_dom_departamento', 'localidad', 'codigo_postal']
