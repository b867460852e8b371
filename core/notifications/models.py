"""
Per-user notifications (verification results, deletion requests, ...).
"""
from django.conf import settings
from django.db import models


class NivelNotificacion(models.TextChoices):
    INFO = 'info', 'Info'
    SUCCESS = 'success', 'Success'
    WARNING = 'warning', 'Warning'
    ERROR = 'error', 'Error'


class Notificacion(models.Model):
    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='notificaciones'
    )
    tipo = models.CharField(max_length=50, blank=True, default='')
    mensaje = models.TextField(blank=True, default='')
    link = models.CharField(max_length=255, blank=True, default='')
    observacion = models.TextField(blank=True, default='')
    nivel = models.CharField(
        max_length=10,
        choices=NivelNotificacion.choices,
        default=NivelNotificacion.INFO
    )
    meta = models.JSONField(default=dict, blank=True)
    leida = models.BooleanField(default=False)
    creado_en = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'notificaciones'
        verbose_name = 'Notificación'
        verbose_name_plural = 'Notificaciones'
        ordering = ['-creado_en', '-id']
        indexes = [
            models.Index(fields=['usuario', 'leida'], name='notif_usuario_leida_idx'),
        ]

    def __str__(self):
        return f"{self.tipo} -> {self.usuario_id}"
