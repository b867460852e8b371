"""
Legajo App Configuration
"""

from django.apps import AppConfig


class LegajoConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'HR.legajo'
    label = 'legajo'
    verbose_name = 'Estado de legajo'

    def ready(self):
        from . import receivers  # noqa: F401
