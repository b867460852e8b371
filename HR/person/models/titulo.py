from django.conf import settings
from django.db import models
from django.utils import timezone

from core.base.models import AuditMixin
from .verificacion import ESTADO_PENDIENTE_ID


class TipoTitulo(models.Model):
    codigo = models.CharField(max_length=20, unique=True)
    nombre = models.CharField(max_length=100)

    class Meta:
        db_table = 'tipos_titulo'
        verbose_name = 'Tipo de título'
        verbose_name_plural = 'Tipos de título'
        ordering = ['id']

    def __str__(self):
        return self.nombre


class Titulo(AuditMixin, models.Model):
    """
    Academic or professional title. One row per
    (persona, nombre_titulo, institucion, fecha_emision).
    """
    persona = models.ForeignKey(
        'person.Persona',
        on_delete=models.CASCADE,
        related_name='titulos'
    )
    tipo_titulo = models.ForeignKey(
        TipoTitulo,
        on_delete=models.PROTECT,
        related_name='titulos'
    )
    nombre_titulo = models.CharField(max_length=255)
    institucion = models.CharField(max_length=255, blank=True, default='')
    fecha_emision = models.DateField(null=True, blank=True)
    matricula_prof = models.CharField(max_length=50, blank=True, default='')
    archivo = models.ForeignKey(
        'person.Archivo',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='titulos'
    )
    estado_verificacion = models.ForeignKey(
        'person.EstadoVerificacion',
        on_delete=models.PROTECT,
        default=ESTADO_PENDIENTE_ID,
        related_name='titulos'
    )
    verificado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='titulos_verificados'
    )
    verificado_en = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'personas_titulos'
        verbose_name = 'Título'
        verbose_name_plural = 'Títulos'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.nombre_titulo

    @property
    def observacion(self):
        verificacion = self.verificaciones.first()
        return verificacion.observacion if verificacion else ''


class VerificacionTitulo(models.Model):
    """History of verification state changes of a title."""
    titulo = models.ForeignKey(
        Titulo,
        on_delete=models.CASCADE,
        related_name='verificaciones'
    )
    estado_verificacion = models.ForeignKey(
        'person.EstadoVerificacion',
        on_delete=models.PROTECT,
        related_name='+'
    )
    observacion = models.TextField(blank=True, default='')
    verificado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    verificado_en = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'verificacion_titulos'
        verbose_name = 'Verificación de título'
        verbose_name_plural = 'Verificaciones de títulos'
        ordering = ['-verificado_en', '-id']
