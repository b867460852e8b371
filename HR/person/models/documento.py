from django.conf import settings
from django.db import models
from django.utils import timezone

from core.base.models import AuditMixin
from .verificacion import ESTADO_PENDIENTE_ID


class TipoDocumentoCodigo(models.TextChoices):
    DNI = 'DNI', 'DNI'
    CUIL = 'CUIL', 'Constancia de CUIL'
    DOM = 'DOM', 'Constancia de domicilio'
    TIT = 'TIT', 'Título habilitante'
    CV = 'CV', 'Currículum vitae'
    FOJA = 'FOJA', 'Foja de servicios'


# Documents every legajo must hold
DOCUMENTOS_OBLIGATORIOS = (
    TipoDocumentoCodigo.DNI,
    TipoDocumentoCodigo.CUIL,
    TipoDocumentoCodigo.DOM,
)


class TipoDocumento(models.Model):
    codigo = models.CharField(max_length=20, unique=True)
    nombre = models.CharField(max_length=100)

    class Meta:
        db_table = 'tipos_documento'
        verbose_name = 'Tipo de documento'
        verbose_name_plural = 'Tipos de documento'
        ordering = ['id']

    def __str__(self):
        return self.nombre

    @property
    def obligatorio(self):
        return self.codigo in DOCUMENTOS_OBLIGATORIOS


class PersonaDocumento(AuditMixin, models.Model):
    """
    Document attached to a persona. created_at is the creation timestamp
    ("creado_en") and created_by the user who loaded it.
    """
    persona = models.ForeignKey(
        'person.Persona',
        on_delete=models.CASCADE,
        related_name='documentos'
    )
    tipo_doc = models.ForeignKey(
        TipoDocumento,
        on_delete=models.PROTECT,
        related_name='documentos'
    )
    archivo = models.ForeignKey(
        'person.Archivo',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='documentos'
    )
    estado_verificacion = models.ForeignKey(
        'person.EstadoVerificacion',
        on_delete=models.PROTECT,
        default=ESTADO_PENDIENTE_ID,
        related_name='documentos'
    )
    vigente = models.BooleanField(default=True)
    verificado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='documentos_verificados'
    )
    verificado_en = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'personas_documentos'
        verbose_name = 'Documento de persona'
        verbose_name_plural = 'Documentos de persona'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['persona', 'tipo_doc'], name='persona_doc_tipo_idx'),
        ]

    def __str__(self):
        return f"{self.tipo_doc.codigo} de {self.persona}"

    @property
    def ultima_verificacion(self):
        return self.verificaciones.first()

    @property
    def observacion(self):
        verificacion = self.ultima_verificacion
        return verificacion.observacion if verificacion else ''


class VerificacionDocumento(models.Model):
    """History of verification state changes of a document."""
    documento = models.ForeignKey(
        PersonaDocumento,
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
        db_table = 'verificacion_documentos'
        verbose_name = 'Verificación de documento'
        verbose_name_plural = 'Verificaciones de documentos'
        ordering = ['-verificado_en', '-id']
