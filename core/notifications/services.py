"""
Notification delivery.

notify_user / notify_admins_rrhh persist Notificacion rows. Callers that use
notifications as a side effect of another operation wrap them in
notify_safely so a delivery problem never undoes the primary operation.
"""
import logging
from typing import List, Optional

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from core.job_roles.core_config import REVIEWER_ROLES
from core.job_roles.models import UserJobRole
from .models import Notificacion, NivelNotificacion

logger = logging.getLogger(__name__)

_PAYLOAD_FIELDS = ('tipo', 'mensaje', 'link', 'observacion', 'nivel', 'meta')


def _build(usuario_id, payload: dict) -> Notificacion:
    data = {key: payload.get(key) for key in _PAYLOAD_FIELDS if payload.get(key) is not None}
    data.setdefault('nivel', NivelNotificacion.INFO)
    data['meta'] = _json_safe(data.get('meta') or {})
    return Notificacion(usuario_id=usuario_id, **data)


def _json_safe(value):
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return str(value)


def get_admin_and_rrhh_ids() -> List[int]:
    """Users holding an active admin or rrhh role, plus admin accounts."""
    today = timezone.now().date()
    role_user_ids = set(
        UserJobRole.objects.active_on(today).filter(
            job_role__code__in=REVIEWER_ROLES
        ).values_list('user_id', flat=True)
    )
    admin_ids = set(
        get_user_model().objects.admins().values_list('id', flat=True)
    )
    return sorted(role_user_ids | admin_ids)


def notify_user(usuario_id, payload: dict) -> Optional[Notificacion]:
    if not usuario_id:
        return None
    notificacion = _build(usuario_id, payload)
    notificacion.save()
    logger.debug(f"Notificacion {notificacion.tipo} para usuario {usuario_id}")
    return notificacion


def notify_admins_rrhh(payload: dict) -> List[Notificacion]:
    ids = get_admin_and_rrhh_ids()
    if not ids:
        return []
    return Notificacion.objects.bulk_create([_build(usuario_id, payload) for usuario_id in ids])


def notify_safely(func, *args, **kwargs):
    """Run a notify_* call, logging instead of raising on failure."""
    try:
        with transaction.atomic():
            return func(*args, **kwargs)
    except Exception as e:
        logger.warning(f"No se pudo enviar la notificacion ({func.__name__}): {e}")
        return None


def mark_as_read(usuario, notificacion_id) -> Optional[Notificacion]:
    notificacion = Notificacion.objects.filter(pk=notificacion_id, usuario=usuario).first()
    if notificacion is None:
        return None
    if not notificacion.leida:
        notificacion.leida = True
        notificacion.save(update_fields=['leida'])
    return notificacion


def mark_all_as_read(usuario) -> int:
    return Notificacion.objects.filter(usuario=usuario, leida=False).update(leida=True)
