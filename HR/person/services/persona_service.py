import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from HR.person.dtos import PersonaCreateDTO, PersonaUpdateDTO, IdentificacionDTO
from HR.person.models import Persona, PersonaIdentificacion
from HR.person.signals import emit_persona_mutated

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ('nombre', 'apellido', 'fecha_nacimiento', 'sexo', 'telefono', 'email')


class PersonaService:
    """Create and edit personas and their identification."""

    @staticmethod
    @transaction.atomic
    def create(user, dto: PersonaCreateDTO) -> Persona:
        persona = Persona(
            nombre=dto.nombre.strip(),
            apellido=dto.apellido.strip(),
            fecha_nacimiento=dto.fecha_nacimiento,
            sexo=dto.sexo.strip(),
            telefono=(dto.telefono or '').strip(),
            email=(dto.email or '').strip(),
        )
        if dto.usuario_id:
            if Persona.objects.filter(usuario_id=dto.usuario_id).exists():
                raise ValidationError({'usuario_id': 'El usuario ya tiene una persona asociada'})
            persona.usuario_id = dto.usuario_id
        persona.stamp(user)
        persona.full_clean()
        persona.save()

        logger.info(f"Persona {persona.pk} creada por {getattr(user, 'pk', None)}")
        emit_persona_mutated(PersonaService, persona.pk, user, 'persona_creada')
        return persona

    @staticmethod
    @transaction.atomic
    def update(user, dto: PersonaUpdateDTO) -> Persona:
        try:
            persona = Persona.objects.select_for_update().get(pk=dto.persona_id)
        except Persona.DoesNotExist:
            raise ValidationError({'persona_id': 'Persona no encontrada'})

        for field in _UPDATABLE_FIELDS:
            value = getattr(dto, field)
            if value is not None:
                setattr(persona, field, value.strip() if isinstance(value, str) else value)

        persona.stamp(user)
        persona.full_clean()
        persona.save()

        emit_persona_mutated(PersonaService, persona.pk, user, 'persona_actualizada')
        return persona

    @staticmethod
    @transaction.atomic
    def set_identificacion(user, dto: IdentificacionDTO) -> PersonaIdentificacion:
        """Create or update the DNI / CUIL of a persona."""
        if not Persona.objects.filter(pk=dto.persona_id).exists():
            raise ValidationError({'persona_id': 'Persona no encontrada'})

        identificacion, _ = PersonaIdentificacion.objects.get_or_create(persona_id=dto.persona_id)
        if dto.dni is not None:
            identificacion.dni = dto.dni.strip()
        if dto.cuil is not None:
            identificacion.cuil = dto.cuil.strip()
        identificacion.stamp(user)
        identificacion.save()

        emit_persona_mutated(PersonaService, dto.persona_id, user, 'identificacion_actualizada')
        return identificacion
