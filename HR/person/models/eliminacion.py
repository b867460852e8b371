from django.conf import settings
from django.db import models


MOTIVO_MAX_LENGTH = 300


class EliminacionSolicitud(models.Model):
    """
    Request to delete a document, domicilio or title, raised by a user who
    cannot delete it directly. The target record is left untouched.
    """

    class Tipo(models.TextChoices):
        DOCUMENTO = 'documento', 'Documento'
        DOMICILIO = 'domicilio', 'Domicilio'
        TITULO = 'titulo', 'Título'

    class Estado(models.TextChoices):
        PENDIENTE = 'PENDIENTE', 'Pendiente'
        APROBADA = 'APROBADA', 'Aprobada'
        RECHAZADA = 'RECHAZADA', 'Rechazada'

    tipo = models.CharField(max_length=20, choices=Tipo.choices)
    objetivo_id = models.PositiveBigIntegerField(help_text="ID of the record to delete")
    persona = models.ForeignKey(
        'person.Persona',
        on_delete=models.CASCADE,
        related_name='solicitudes_eliminacion'
    )
    motivo = models.CharField(max_length=MOTIVO_MAX_LENGTH, null=True, blank=True)
    estado = models.CharField(max_length=20, choices=Estado.choices, default=Estado.PENDIENTE)
    solicitado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='solicitudes_eliminacion'
    )
    creado_en = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'eliminacion_solicitudes'
        verbose_name = 'Solicitud de eliminación'
        verbose_name_plural = 'Solicitudes de eliminación'
        ordering = ['-creado_en', '-id']

    def __str__(self):
        return f"{self.tipo} #{self.objetivo_id} ({self.estado})"
