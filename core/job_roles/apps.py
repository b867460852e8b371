from django.apps import AppConfig


class JobRolesConfig(AppConfig):
    """Roles, pages and actions that gate the legajo API."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core.job_roles'
    label = 'job_roles'
    verbose_name = 'Roles y permisos'
