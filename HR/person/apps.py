from django.apps import AppConfig


class PersonConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'HR.person'
    label = 'person'
    verbose_name = 'Personas y legajo documental'
