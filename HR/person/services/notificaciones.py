"""Notification helpers for persona sub-resources."""
from core.notifications.services import notify_admins_rrhh, notify_safely, notify_user


def legajo_link(persona_id=None):
    if persona_id is None:
        return '/dashboard/legajo'
    return f'/dashboard/legajo?persona={persona_id}'


def notify_owner(persona, payload: dict):
    """Notify the user account of the persona, if it has one."""
    if persona is None or not persona.usuario_id:
        return None
    payload.setdefault('link', legajo_link())
    return notify_safely(notify_user, persona.usuario_id, payload)


def notify_reviewers(persona_id, payload: dict):
    payload.setdefault('link', legajo_link(persona_id))
    return notify_safely(notify_admins_rrhh, payload)


def acting_user_id(user):
    return user.pk if getattr(user, 'is_authenticated', False) else None
