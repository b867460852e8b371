"""
Access decorators for the function views of the legajo API.

Stack them below @api_view, page check first:

    @api_view(['GET', 'POST'])
    @require_page_action('hr_documentos')
    @require_persona_access('persona_id')
    def documento_list(request, persona_id):
        ...
"""
from functools import wraps

from rest_framework import status
from rest_framework.response import Response

from core.job_roles.core_config import CoreActions
from core.job_roles.services import is_privileged, user_can_perform_action, user_owns_persona

# action checked when the decorator does not name one
METHOD_ACTIONS = {
    'GET': CoreActions.VIEW,
    'HEAD': CoreActions.VIEW,
    'POST': CoreActions.CREATE,
    'PUT': CoreActions.EDIT,
    'PATCH': CoreActions.EDIT,
    'DELETE': CoreActions.DELETE,
}


def forbidden(detail, **extra):
    """403 body shared by the permission checks: {"error", "detail", ...}."""
    body = {'error': 'Acceso denegado', 'detail': detail}
    body.update(extra)
    return Response(body, status=status.HTTP_403_FORBIDDEN)


def _unauthenticated():
    return Response({'error': 'Autenticación requerida'}, status=status.HTTP_401_UNAUTHORIZED)


def require_page_action(page_code, action_code=None):
    """
    Require an action on a page through the user's job roles.

    action_code defaults to the action of the HTTP method (GET view,
    POST create, PUT/PATCH edit, DELETE delete).
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if not request.user.is_authenticated:
                return _unauthenticated()

            action = action_code or METHOD_ACTIONS.get(request.method, CoreActions.VIEW)
            allowed, reason = user_can_perform_action(request.user, page_code, action)
            if not allowed:
                return forbidden(reason, required_permission={'page': page_code, 'action': action})
            return view_func(request, *args, **kwargs)

        wrapper.page_code = page_code
        wrapper.action_code = action_code
        return wrapper
    return decorator


def require_persona_access(persona_id_param='persona_id'):
    """
    Owner-or-privileged access to a persona's legajo.

    The persona linked to the account is always reachable; any other needs
    a privileged role (admin, rrhh, administrativo).
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if not request.user.is_authenticated:
                return _unauthenticated()

            persona_id = kwargs.get(persona_id_param)
            owner = persona_id is not None and user_owns_persona(request.user, persona_id)
            if not (owner or is_privileged(request.user)):
                return forbidden('Solo podés acceder a tu propio legajo')
            return view_func(request, *args, **kwargs)
        return wrapper
    return decorator
