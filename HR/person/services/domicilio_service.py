"""
Domicilios and barrios of a persona.

A domicilio always references an existing DomBarrio. New barrios are
created on demand and assigned to the persona through PersonaBarrio.
"""
import logging

from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction

from core.job_roles.services import is_reviewer, user_owns_persona
from HR.person.dtos import BarrioCreateDTO, DomicilioCreateDTO
from HR.person.models import DomBarrio, DomLocalidad, Domicilio, Persona, PersonaBarrio
from HR.person.signals import emit_persona_mutated
from .notificaciones import acting_user_id, notify_owner, notify_reviewers

logger = logging.getLogger(__name__)

CALLE_MAX_LENGTH = 120
BARRIO_MAX_LENGTH = 120
BARRIO_DETALLE_MAX_LENGTH = 20


def _get_persona(persona_id) -> Persona:
    try:
        return Persona.objects.get(pk=persona_id)
    except Persona.DoesNotExist:
        raise ValidationError({'persona_id': 'Persona no encontrada'})


def parse_altura(value) -> int:
    """altura must be an integer >= 1 (ints or digit strings)."""
    if isinstance(value, bool):
        raise ValidationError({'altura': 'La altura debe ser un entero positivo'})
    if isinstance(value, int):
        altura = value
    else:
        raw = str(value if value is not None else '').strip()
        if not raw:
            raise ValidationError({'altura': 'La altura es obligatoria'})
        if not raw.isdigit():
            raise ValidationError({'altura': 'La altura debe ser un entero positivo'})
        altura = int(raw)
    if altura < 1:
        raise ValidationError({'altura': 'La altura debe ser un entero positivo'})
    return altura


class DomicilioService:

    @staticmethod
    @transaction.atomic
    def create_barrio(user, dto: BarrioCreateDTO) -> DomBarrio:
        try:
            localidad = DomLocalidad.objects.get(pk=dto.id_dom_localidad)
        except DomLocalidad.DoesNotExist:
            raise ValidationError({'id_dom_localidad': 'Localidad no encontrada'})

        nombre = (dto.barrio or '').strip()
        errors = {}
        if not nombre:
            errors['barrio'] = 'El nombre del barrio es obligatorio'
        elif len(nombre) > BARRIO_MAX_LENGTH:
            errors['barrio'] = f'Máximo {BARRIO_MAX_LENGTH} caracteres'

        detalle = {}
        for field in ('manzana', 'casa', 'departamento', 'piso'):
            value = (getattr(dto, field) or '').strip()
            if len(value) > BARRIO_DETALLE_MAX_LENGTH:
                errors[field] = f'Máximo {BARRIO_DETALLE_MAX_LENGTH} caracteres'
            detalle[field] = value
        if errors:
            raise ValidationError(errors)

        barrio = DomBarrio.objects.create(localidad=localidad, barrio=nombre, **detalle)
        logger.info(f"Barrio {barrio.pk} '{nombre}' creado en localidad {localidad.pk}")
        return barrio

    @staticmethod
    @transaction.atomic
    def assign_barrio(user, persona_id, barrio_id) -> PersonaBarrio:
        """Assign a barrio to a persona. Assigning twice returns the existing row."""
        persona = _get_persona(persona_id)
        if not DomBarrio.objects.filter(pk=barrio_id).exists():
            raise ValidationError({'id_dom_barrio': 'Barrio no encontrado'})

        asignacion, created = PersonaBarrio.objects.get_or_create(persona=persona, barrio_id=barrio_id)
        if created:
            emit_persona_mutated(DomicilioService, persona.pk, user, 'barrio_asignado')
        return asignacion

    @staticmethod
    @transaction.atomic
    def unassign_barrio(user, persona_id, barrio_id) -> bool:
        deleted, _ = PersonaBarrio.objects.filter(persona_id=persona_id, barrio_id=barrio_id).delete()
        if not deleted:
            raise ValidationError('El barrio no está asignado a la persona')
        emit_persona_mutated(DomicilioService, persona_id, user, 'barrio_desvinculado')
        return True

    @staticmethod
    @transaction.atomic
    def create_domicilio(user, dto: DomicilioCreateDTO) -> Domicilio:
        """
        Validates:
        - calle required, at most 120 characters
        - altura integer >= 1
        - barrio exists
        """
        persona = _get_persona(dto.persona_id)

        errors = {}
        calle = (dto.calle or '').strip()
        if not calle:
            errors['calle'] = 'La calle es obligatoria'
        elif len(calle) > CALLE_MAX_LENGTH:
            errors['calle'] = f'Máximo {CALLE_MAX_LENGTH} caracteres'
        try:
            altura = parse_altura(dto.altura)
        except ValidationError as e:
            errors.update(e.message_dict)
        if not dto.id_dom_barrio:
            errors['id_dom_barrio'] = 'Debés seleccionar o crear un barrio'
        elif not DomBarrio.objects.filter(pk=dto.id_dom_barrio).exists():
            errors['id_dom_barrio'] = 'Barrio no encontrado'
        if errors:
            raise ValidationError(errors)

        domicilio = Domicilio(persona=persona, barrio_id=dto.id_dom_barrio, calle=calle, altura=altura)
        domicilio.stamp(user)
        domicilio.save()

        emit_persona_mutated(DomicilioService, persona.pk, user, 'domicilio_creado')
        return domicilio

    @staticmethod
    @transaction.atomic
    def delete_domicilio(user, persona_id, domicilio_id) -> dict:
        """
        Reviewers (admin, rrhh) or the persona owning the domicilio may delete it.

        Raises:
            PermissionDenied: any other user
            ValidationError: the domicilio is not the persona's
        """
        if not (is_reviewer(user) or user_owns_persona(user, persona_id)):
            raise PermissionDenied('Acceso denegado')

        domicilio = Domicilio.objects.select_related('persona').get(pk=domicilio_id)
        if str(domicilio.persona_id) != str(persona_id):
            raise ValidationError('Domicilio no pertenece a la persona indicada')

        persona = domicilio.persona
        snapshot = {
            'id': domicilio.pk,
            'id_persona': persona.pk,
            'calle': domicilio.calle,
            'altura': domicilio.altura,
            'id_dom_barrio': domicilio.barrio_id,
        }
        domicilio.delete()
        logger.info(f"Domicilio {domicilio_id} de persona {persona.pk} eliminado por {acting_user_id(user)}")

        descripcion = f'{snapshot["calle"]} {snapshot["altura"]}'
        notify_owner(persona, {
            'tipo': 'DOMICILIO_ELIMINADO',
            'mensaje': f'Se eliminó tu domicilio "{descripcion}"',
            'meta': {'id_domicilio': snapshot['id'], 'id_persona': persona.pk},
            'nivel': 'warning',
        })
        notify_reviewers(persona.pk, {
            'tipo': 'DOMICILIO_ELIMINADO',
            'mensaje': f'{persona.full_name}: domicilio eliminado ({descripcion})',
            'meta': {
                'id_domicilio': snapshot['id'],
                'id_persona': persona.pk,
                'eliminado_por': acting_user_id(user),
            },
        })

        emit_persona_mutated(DomicilioService, persona.pk, user, 'domicilio_eliminado')
        return snapshot

    @staticmethod
    def list_domicilios(persona_id):
        return Domicilio.objects.filter(persona_id=persona_id).select_related(
            'barrio', 'barrio__localidad', 'barrio__localidad__departamento'
        )

    @staticmethod
    def list_barrios(persona_id):
        return PersonaBarrio.objects.filter(persona_id=persona_id).select_related(
            'barrio', 'barrio__localidad', 'barrio__localidad__departamento'
        )
