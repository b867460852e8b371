from django.conf import settings
from django.core.validators import RegexValidator
from django.db import models

from core.base.models import AuditMixin


TELEFONO_REGEX = r'^\+?\d{7,15}$'

telefono_validator = RegexValidator(
    regex=TELEFONO_REGEX,
    message='El teléfono debe tener entre 7 y 15 dígitos, con + opcional'
)


class Persona(AuditMixin, models.Model):
    """
    Staff member whose dossier (legajo) is managed.
    Personas are never deleted by the dossier flows.
    """
    nombre = models.CharField(max_length=100)
    apellido = models.CharField(max_length=100)
    fecha_nacimiento = models.DateField(null=True, blank=True)
    sexo = models.CharField(max_length=20, blank=True, default='')
    telefono = models.CharField(max_length=16, blank=True, default='', validators=[telefono_validator])
    email = models.EmailField(blank=True, default='')
    usuario = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='persona',
        help_text="User account of the persona, if any"
    )

    class Meta:
        db_table = 'personas'
        verbose_name = 'Persona'
        verbose_name_plural = 'Personas'
        ordering = ['apellido', 'nombre']

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return f"{self.apellido}, {self.nombre}"

    def has_datos_basicos(self):
        return bool(self.nombre and self.apellido and self.fecha_nacimiento and self.sexo)


class PersonaIdentificacion(AuditMixin, models.Model):
    """DNI / CUIL of a persona (one row per persona)."""
    persona = models.OneToOneField(
        Persona,
        on_delete=models.CASCADE,
        related_name='identificacion'
    )
    dni = models.CharField(max_length=20, blank=True, default='')
    cuil = models.CharField(max_length=20, blank=True, default='')

    class Meta:
        db_table = 'personas_identificacion'
        verbose_name = 'Identificación'
        verbose_name_plural = 'Identificaciones'

    def __str__(self):
        return f"{self.persona} DNI {self.dni}"

    @property
    def completa(self):
        return bool(self.dni and self.cuil)
