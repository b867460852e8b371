"""
Verification state catalogue shared by documents, titles and identifications.

Ids are fixed: PENDIENTE=1, APROBADO=2, RECHAZADO=3, OBSERVADO=4.
"""
from django.core.exceptions import ValidationError
from django.db import models


class EstadoVerificacionCodigo(models.TextChoices):
    PENDIENTE = 'PENDIENTE', 'Pendiente'
    APROBADO = 'APROBADO', 'Aprobado'
    RECHAZADO = 'RECHAZADO', 'Rechazado'
    OBSERVADO = 'OBSERVADO', 'Observado'


ESTADO_PENDIENTE_ID = 1

ESTADOS_VERIFICACION = [
    (1, EstadoVerificacionCodigo.PENDIENTE),
    (2, EstadoVerificacionCodigo.APROBADO),
    (3, EstadoVerificacionCodigo.RECHAZADO),
    (4, EstadoVerificacionCodigo.OBSERVADO),
]

# States whose observacion is mandatory
CODIGOS_CON_OBSERVACION = frozenset({
    EstadoVerificacionCodigo.RECHAZADO,
    EstadoVerificacionCodigo.OBSERVADO,
})

_NIVELES = {
    EstadoVerificacionCodigo.APROBADO: 'success',
    EstadoVerificacionCodigo.RECHAZADO: 'error',
    EstadoVerificacionCodigo.OBSERVADO: 'warning',
}


def requiere_observacion(codigo) -> bool:
    return str(codigo or '').upper() in CODIGOS_CON_OBSERVACION


def nivel_notificacion(codigo) -> str:
    """success / error / warning for APROBADO / RECHAZADO / OBSERVADO, info otherwise."""
    return _NIVELES.get(str(codigo or '').upper(), 'info')


class EstadoVerificacion(models.Model):
    id = models.PositiveSmallIntegerField(primary_key=True)
    codigo = models.CharField(max_length=20, unique=True, choices=EstadoVerificacionCodigo.choices)
    nombre = models.CharField(max_length=60)

    class Meta:
        db_table = 'estado_verificacion'
        verbose_name = 'Estado de verificación'
        verbose_name_plural = 'Estados de verificación'
        ordering = ['id']

    def __str__(self):
        return self.nombre

    @property
    def requiere_observacion(self):
        return requiere_observacion(self.codigo)

    @classmethod
    def resolve(cls, value):
        """
        Find an estado by id (int or numeric string) or by codigo
        (case-insensitive). Raises ValidationError when it does not exist.
        """
        if isinstance(value, cls):
            return value
        raw = str(value if value is not None else '').strip()
        if not raw:
            raise ValidationError({'id_estado_verificacion': 'Estado requerido'})
        try:
            if raw.isdigit():
                return cls.objects.get(pk=int(raw))
            return cls.objects.get(codigo=raw.upper())
        except cls.DoesNotExist:
            raise ValidationError({'id_estado_verificacion': 'Estado inválido'})
