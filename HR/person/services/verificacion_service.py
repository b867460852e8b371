"""
Verification state rules shared by documents and titles.

- Any state may move to any other state.
- RECHAZADO / OBSERVADO need a non-blank observacion.
- Non privileged creators always start in PENDIENTE.
"""
from django.core.exceptions import ValidationError
from django.utils import timezone

from core.job_roles.services import is_privileged
from HR.person.models import EstadoVerificacion, ESTADO_PENDIENTE_ID

OBSERVACION_REQUERIDA_MSG = 'Debés indicar una observación para Rechazado/Observado'


def clean_observacion(observacion) -> str:
    return str(observacion or '').strip()


def validate_estado_con_observacion(estado: EstadoVerificacion, observacion) -> str:
    """Return the stripped observacion or raise when the estado requires one."""
    obs = clean_observacion(observacion)
    if estado.requiere_observacion and not obs:
        raise ValidationError({'observacion': OBSERVACION_REQUERIDA_MSG})
    return obs


def resolve_estado_inicial(user, requested) -> EstadoVerificacion:
    """
    Initial state of a new document or title: the requested one for
    privileged users (PENDIENTE when none requested), PENDIENTE otherwise.
    """
    if requested not in (None, '') and is_privileged(user):
        return EstadoVerificacion.resolve(requested)
    return EstadoVerificacion.objects.get(pk=ESTADO_PENDIENTE_ID)


def apply_estado(entity, estado: EstadoVerificacion, user, observacion: str, historial_model, fk_name: str):
    """
    Persist the estado on entity and append a verification history row.
    """
    now = timezone.now()
    acting = user if getattr(user, 'is_authenticated', False) else None
    entity.estado_verificacion = estado
    entity.verificado_por = acting
    entity.verificado_en = now
    entity.updated_by = acting
    entity.save(update_fields=['estado_verificacion', 'verificado_por', 'verificado_en', 'updated_by', 'updated_at'])

    historial_model.objects.create(**{
        fk_name: entity,
        'estado_verificacion': estado,
        'observacion': observacion,
        'verificado_por': acting,
        'verificado_en': now,
    })
    return entity


def record_reset(entity, user, historial_model, fk_name: str):
    """
    History row for an entity sent back to PENDIENTE by a resubmission, so the
    previous observacion no longer reads as the current one.
    """
    return historial_model.objects.create(**{
        fk_name: entity,
        'estado_verificacion': entity.estado_verificacion,
        'observacion': '',
        'verificado_por': user if getattr(user, 'is_authenticated', False) else None,
        'verificado_en': timezone.now(),
    })
