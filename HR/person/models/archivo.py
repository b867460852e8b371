import os
import uuid

from django.conf import settings
from django.db import models


def archivo_upload_to(instance, filename):
    persona_part = instance.persona_id or 'sin_persona'
    return f"personas/{persona_part}/{uuid.uuid4().hex}_{os.path.basename(filename)}"


class Archivo(models.Model):
    """
    Uploaded file. Linked afterwards from a PersonaDocumento or a Titulo.
    """
    persona = models.ForeignKey(
        'person.Persona',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='archivos'
    )
    archivo = models.FileField(upload_to=archivo_upload_to, max_length=255)
    nombre_original = models.CharField(max_length=255)
    content_type = models.CharField(max_length=100, blank=True, default='')
    size_bytes = models.PositiveBigIntegerField(default=0)
    sha256_hex = models.CharField(max_length=64, blank=True, default='')
    subido_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='archivos_subidos'
    )
    subido_en = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'archivos'
        verbose_name = 'Archivo'
        verbose_name_plural = 'Archivos'
        ordering = ['-subido_en', '-id']

    def __str__(self):
        return self.nombre_original

    def count_references(self):
        """Documents and titles still pointing at this file."""
        return self.documentos.count() + self.titulos.count()

    def is_uploaded_by(self, user):
        return bool(user and user.is_authenticated and self.subido_por_id == user.pk)
