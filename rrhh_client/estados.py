"""Display mapping of verification states."""
from collections import namedtuple

from .rules import ESTADO_CODIGOS

EstadoVisual = namedtuple('EstadoVisual', ['codigo', 'icono', 'color', 'nivel'])

_VISUALES = {
    'APROBADO': EstadoVisual('APROBADO', 'check', 'green', 'success'),
    'RECHAZADO': EstadoVisual('RECHAZADO', 'x', 'red', 'error'),
    'OBSERVADO': EstadoVisual('OBSERVADO', 'alert-triangle', 'gray', 'warning'),
}


def estado_visual(estado) -> EstadoVisual:
    """
    Icon, colour and notification level for an estado (id or codigo).
    Anything unknown renders as pending.
    """
    if isinstance(estado, int):
        codigo = ESTADO_CODIGOS.get(estado, 'PENDIENTE')
    else:
        codigo = str(estado or 'PENDIENTE').upper()
    return _VISUALES.get(codigo, EstadoVisual(codigo, 'clock', 'yellow', 'info'))


def nivel_notificacion(estado) -> str:
    return estado_visual(estado).nivel
