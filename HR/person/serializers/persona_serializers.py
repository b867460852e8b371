"""
Serializers for Persona and PersonaIdentificacion
"""
from rest_framework import serializers

from HR.person.dtos import PersonaCreateDTO, PersonaUpdateDTO, IdentificacionDTO
from HR.person.models import Persona, PersonaIdentificacion
from HR.person.models.persona import TELEFONO_REGEX

TELEFONO_ERROR = 'El teléfono debe tener entre 7 y 15 dígitos, con + opcional'


class PersonaSerializer(serializers.ModelSerializer):
    """Read serializer for Persona"""
    id_persona = serializers.IntegerField(source='id', read_only=True)
    id_usuario = serializers.IntegerField(source='usuario_id', read_only=True)
    full_name = serializers.CharField(read_only=True)
    dni = serializers.SerializerMethodField()
    cuil = serializers.SerializerMethodField()
    creado_en = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Persona
        fields = [
            'id', 'id_persona', 'nombre', 'apellido', 'full_name', 'fecha_nacimiento',
            'sexo', 'telefono', 'email', 'id_usuario', 'dni', 'cuil', 'creado_en'
        ]

    def _identificacion(self, obj):
        return getattr(obj, 'identificacion', None)

    def get_dni(self, obj):
        ident = self._identificacion(obj)
        return ident.dni if ident else None

    def get_cuil(self, obj):
        ident = self._identificacion(obj)
        return ident.cuil if ident else None


class PersonaCreateSerializer(serializers.Serializer):
    """Write serializer for creating a persona"""
    nombre = serializers.CharField(max_length=100, error_messages={'blank': 'El nombre es obligatorio'})
    apellido = serializers.CharField(max_length=100, error_messages={'blank': 'El apellido es obligatorio'})
    fecha_nacimiento = serializers.DateField(error_messages={
        'null': 'La fecha de nacimiento es obligatoria',
        'invalid': 'La fecha de nacimiento no es válida',
    })
    sexo = serializers.CharField(max_length=20, error_messages={'blank': 'El sexo es obligatorio'})
    telefono = serializers.RegexField(
        TELEFONO_REGEX, max_length=16, required=False, allow_blank=True,
        error_messages={'invalid': TELEFONO_ERROR}
    )
    email = serializers.EmailField(required=False, allow_blank=True)
    usuario_id = serializers.IntegerField(required=False, allow_null=True)

    def to_dto(self):
        return PersonaCreateDTO(**self.validated_data)


class PersonaUpdateSerializer(serializers.Serializer):
    """Write serializer for updating a persona (partial)"""
    nombre = serializers.CharField(max_length=100, required=False)
    apellido = serializers.CharField(max_length=100, required=False)
    fecha_nacimiento = serializers.DateField(required=False, error_messages={
        'invalid': 'La fecha de nacimiento no es válida',
    })
    sexo = serializers.CharField(max_length=20, required=False)
    telefono = serializers.RegexField(
        TELEFONO_REGEX, max_length=16, required=False, allow_blank=True,
        error_messages={'invalid': TELEFONO_ERROR}
    )
    email = serializers.EmailField(required=False, allow_blank=True)

    def to_dto(self, persona_id):
        return PersonaUpdateDTO(persona_id=persona_id, **self.validated_data)


class PersonaIdentificacionSerializer(serializers.ModelSerializer):
    id_persona = serializers.IntegerField(source='persona_id', read_only=True)

    class Meta:
        model = PersonaIdentificacion
        fields = ['id', 'id_persona', 'dni', 'cuil']


class PersonaIdentificacionWriteSerializer(serializers.Serializer):
    dni = serializers.RegexField(
        r'^\d{7,8}$', required=False, allow_blank=True,
        error_messages={'invalid': 'El DNI debe tener 7 u 8 dígitos'}
    )
    cuil = serializers.RegexField(
        r'^\d{11}$', required=False, allow_blank=True,
        error_messages={'invalid': 'El CUIL debe tener 11 dígitos'}
    )

    def validate(self, attrs):
        if not attrs.get('dni') and not attrs.get('cuil'):
            raise serializers.ValidationError('Indicá DNI o CUIL')
        return attrs

    def to_dto(self, persona_id):
        return IdentificacionDTO(persona_id=persona_id, **self.validated_data)
