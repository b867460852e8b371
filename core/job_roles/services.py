"""
Service layer for Job Roles permission checking.
Contains business logic for role-based access control.
"""
from typing import Tuple, List, Set

from django.utils import timezone

from .core_config import PRIVILEGED_ROLES, REVIEWER_ROLES
from .models import JobRole, Page, Action, PageAction, JobRolePage, UserJobRole


def get_user_active_roles(user) -> List[JobRole]:
    """
    Job roles currently effective for a user (UserJobRole active today).
    """
    if not user or not user.is_authenticated:
        return []

    today = timezone.now().date()
    job_role_ids = UserJobRole.objects.active_on(today).filter(
        user=user
    ).values_list('job_role_id', flat=True)
    return list(JobRole.objects.filter(id__in=job_role_ids))


def get_user_role_codes(user) -> Set[str]:
    """Codes of the user's active roles, plus 'admin' for admin accounts."""
    codes = {role.code for role in get_user_active_roles(user)}
    if hasattr(user, 'is_admin') and user.is_admin():
        codes.add('admin')
    return codes


def user_has_any_role(user, role_codes) -> bool:
    return bool(get_user_role_codes(user) & set(role_codes))


def is_privileged(user) -> bool:
    """ADMIN, RRHH or ADMINISTRATIVO."""
    return user_has_any_role(user, PRIVILEGED_ROLES)


def is_reviewer(user) -> bool:
    """ADMIN or RRHH."""
    return user_has_any_role(user, REVIEWER_ROLES)


def get_all_effective_pages_for_roles(roles: List[JobRole]) -> Set[int]:
    """Page IDs granted by any of the roles."""
    return set(
        JobRolePage.objects.filter(
            job_role__in=roles
        ).values_list('page_id', flat=True)
    )


def user_can_perform_action(user, page_code: str, action_code: str) -> Tuple[bool, str]:
    """
    Check if a user can perform a specific action on a page.

    Returns:
        Tuple of (allowed: bool, reason: str)

    Permission Logic (priority order):
    1. Admin account bypass
    2. Page and action must exist and be linked (PageAction)
    3. Role grants (UserJobRole -> JobRole -> JobRolePage)
    4. Default: denied
    """
    if hasattr(user, 'is_admin') and user.is_admin():
        return True, "Permitido (cuenta administradora)"

    try:
        page = Page.objects.get(code=page_code)
    except Page.DoesNotExist:
        return False, f"La página '{page_code}' no existe"

    try:
        action = Action.objects.get(code=action_code)
    except Action.DoesNotExist:
        return False, f"La acción '{action_code}' no existe"

    if not PageAction.objects.filter(page=page, action=action).exists():
        return False, f"La acción '{action_code}' no aplica a la página '{page_code}'"

    effective_roles = get_user_active_roles(user)
    if not effective_roles:
        return False, "El usuario no tiene roles vigentes"

    if page.pk in get_all_effective_pages_for_roles(effective_roles):
        return True, "Permitido"

    role_names = ', '.join(r.name for r in effective_roles)
    return False, f"Tus roles ({role_names}) no tienen acceso a la página '{page_code}'"


def get_user_all_permissions(user) -> list:
    """
    Pages and actions a user can access.

        [{'page': 'hr_documentos', 'page_name': 'Documentos',
          'allowed_actions': ['view', 'create', 'edit', 'delete']}, ...]
    """
    if hasattr(user, 'is_admin') and user.is_admin():
        pages = Page.objects.all()
    else:
        page_ids = get_all_effective_pages_for_roles(get_user_active_roles(user))
        pages = Page.objects.filter(pk__in=page_ids)

    permissions = []
    for page in pages.prefetch_related('page_actions__action'):
        permissions.append({
            'page': page.code,
            'page_name': page.name,
            'allowed_actions': [pa.action.code for pa in page.page_actions.all()],
        })
    return permissions


def assign_role(user, role_code: str, start_date=None) -> UserJobRole:
    """Give a user a role starting today (idempotent for open assignments)."""
    role = JobRole.objects.get(code=role_code)
    assignment, _ = UserJobRole.objects.get_or_create(
        user=user,
        job_role=role,
        effective_end_date=None,
        defaults={'effective_start_date': start_date or timezone.now().date()}
    )
    return assignment


def get_user_persona_id(user):
    """ID of the persona linked to the user account, or None."""
    if not user or not user.is_authenticated:
        return None
    # queried every time, the reverse accessor caches misses on the user instance
    persona_model = user._meta.get_field('persona').related_model
    return persona_model.objects.filter(usuario_id=user.pk).values_list('pk', flat=True).first()


def user_owns_persona(user, persona_id) -> bool:
    owner_id = get_user_persona_id(user)
    return owner_id is not None and str(owner_id) == str(persona_id)
