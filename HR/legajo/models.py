"""
Legajo (personnel dossier) status models.

The legajo codigo of a persona is derived from a checklist over its data
(see LegajoService.recalcular) or assigned manually by a reviewer. Every
change is appended to LegajoHistorial.
"""
from django.conf import settings
from django.db import models


class EstadoLegajoCodigo(models.TextChoices):
    INCOMPLETO = 'INCOMPLETO', 'Incompleto'
    PENDIENTE = 'PENDIENTE', 'Pendiente de revisión'
    REVISION = 'REVISION', 'En revisión'
    VALIDADO = 'VALIDADO', 'Validado'
    BLOQUEADO = 'BLOQUEADO', 'Bloqueado'


MOTIVO_RECALCULO = 'Recalculo automático'
MOTIVO_MANUAL = 'Asignación manual'


class EstadoLegajo(models.Model):
    id = models.PositiveSmallIntegerField(primary_key=True)
    codigo = models.CharField(max_length=20, unique=True, choices=EstadoLegajoCodigo.choices)
    nombre = models.CharField(max_length=60)

    class Meta:
        db_table = 'estados_legajo'
        verbose_name = 'Estado de legajo'
        verbose_name_plural = 'Estados de legajo'
        ordering = ['id']

    def __str__(self):
        return self.nombre


class PersonaLegajoEstado(models.Model):
    """Current legajo state of a persona (one row per persona)."""
    persona = models.OneToOneField(
        'person.Persona',
        on_delete=models.CASCADE,
        related_name='legajo_estado'
    )
    estado = models.ForeignKey(EstadoLegajo, on_delete=models.PROTECT, related_name='personas')
    actualizado_en = models.DateTimeField(auto_now=True)
    actualizado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )

    class Meta:
        db_table = 'personas_legajo_estado'
        verbose_name = 'Estado de legajo de persona'
        verbose_name_plural = 'Estados de legajo de personas'

    def __str__(self):
        return f"{self.persona_id}: {self.estado.codigo}"


class LegajoHistorial(models.Model):
    persona = models.ForeignKey(
        'person.Persona',
        on_delete=models.CASCADE,
        related_name='legajo_historial'
    )
    estado = models.ForeignKey(EstadoLegajo, on_delete=models.PROTECT, related_name='+')
    motivo = models.CharField(max_length=255, null=True, blank=True)
    cambiado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    cambiado_en = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'personas_legajo_historial'
        verbose_name = 'Historial de legajo'
        verbose_name_plural = 'Historial de legajos'
        ordering = ['-cambiado_en', '-id']


class PlazoGracia(models.Model):
    """Grace deadline to complete the legajo. At most one active per persona."""
    persona = models.ForeignKey(
        'person.Persona',
        on_delete=models.CASCADE,
        related_name='plazos_gracia'
    )
    fecha_limite = models.DateField()
    motivo = models.CharField(max_length=300, null=True, blank=True)
    activo = models.BooleanField(default=True)
    creado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    creado_en = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'personas_legajo_plazo'
        verbose_name = 'Plazo de gracia'
        verbose_name_plural = 'Plazos de gracia'
        ordering = ['-creado_en', '-id']
