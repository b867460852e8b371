"""
Serializers for Domicilio, DomBarrio and PersonaBarrio
"""
from rest_framework import serializers

from HR.person.dtos import BarrioCreateDTO, DomicilioCreateDTO
from HR.person.models import DomBarrio, Domicilio, PersonaBarrio


class DomBarrioSerializer(serializers.ModelSerializer):
    id_dom_barrio = serializers.IntegerField(source='id', read_only=True)
    id_dom_localidad = serializers.IntegerField(source='localidad_id', read_only=True)
    localidad = serializers.CharField(source='localidad.localidad', read_only=True)
    departamento_nombre = serializers.CharField(source='localidad.departamento.departamento', read_only=True)

    class Meta:
        model = DomBarrio
        fields = [
            'id', 'id_dom_barrio', 'id_dom_localidad', 'localidad', 'departamento_nombre',
            'barrio', 'manzana', 'casa', 'departamento', 'piso'
        ]


class PersonaBarrioSerializer(serializers.ModelSerializer):
    id_persona = serializers.IntegerField(source='persona_id', read_only=True)
    id_dom_barrio = serializers.IntegerField(source='barrio_id', read_only=True)
    barrio = DomBarrioSerializer(read_only=True)

    class Meta:
        model = PersonaBarrio
        fields = ['id', 'id_persona', 'id_dom_barrio', 'barrio', 'asignado_en']


class DomicilioSerializer(serializers.ModelSerializer):
    """Read serializer for Domicilio"""
    id_domicilio = serializers.IntegerField(source='id', read_only=True)
    id_persona = serializers.IntegerField(source='persona_id', read_only=True)
    id_dom_barrio = serializers.IntegerField(source='barrio_id', read_only=True)
    barrio = serializers.CharField(source='barrio.barrio', read_only=True)
    localidad = serializers.CharField(source='barrio.localidad.localidad', read_only=True)
    departamento = serializers.CharField(source='barrio.localidad.departamento.departamento', read_only=True)
    creado_en = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Domicilio
        fields = [
            'id', 'id_domicilio', 'id_persona', 'calle', 'altura',
            'id_dom_barrio', 'barrio', 'localidad', 'departamento', 'creado_en'
        ]


class BarrioCreateSerializer(serializers.Serializer):
    barrio = serializers.CharField(max_length=120, error_messages={'blank': 'El nombre del barrio es obligatorio'})
    manzana = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    casa = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    departamento = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    piso = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')

    def to_dto(self, localidad_id):
        return BarrioCreateDTO(id_dom_localidad=localidad_id, **self.validated_data)


class PersonaBarrioAssignSerializer(serializers.Serializer):
    id_dom_barrio = serializers.IntegerField()


class DomicilioCreateSerializer(serializers.Serializer):
    """Write serializer for creating a domicilio"""
    calle = serializers.CharField(max_length=120, error_messages={'blank': 'La calle es obligatoria'})
    altura = serializers.IntegerField(min_value=1, error_messages={
        'invalid': 'La altura debe ser un entero positivo',
        'min_value': 'La altura debe ser un entero positivo',
    })
    id_dom_barrio = serializers.IntegerField(error_messages={
        'required': 'Debés seleccionar o crear un barrio',
    })

    def to_dto(self, persona_id):
        return DomicilioCreateDTO(persona_id=persona_id, **self.validated_data)
