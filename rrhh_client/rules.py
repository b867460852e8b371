"""
Client side validation.

Checks here run before any request is issued; a failure raises
ClientValidationError and nothing reaches the network.
"""
import re
from typing import Optional

from dateutil.parser import isoparse

ESTADOS_CON_OBSERVACION = ('RECHAZADO', 'OBSERVADO')

# id -> codigo of estado_verificacion (seeded catalogue)
ESTADO_CODIGOS = {1: 'PENDIENTE', 2: 'APROBADO', 3: 'RECHAZADO', 4: 'OBSERVADO'}

TELEFONO_RE = re.compile(r'^\+?\d{7,15}$')


class ClientValidationError(Exception):
    """Input rejected before contacting the server."""

    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field


def _ascii_number(text) -> bool:
    # str.isdigit accepts superscripts and circled digits that int() rejects
    return text.isascii() and text.isdigit()


def estado_codigo(estado) -> str:
    """Normalise an estado given as id (1..4) or codigo."""
    if isinstance(estado, int) or (isinstance(estado, str) and _ascii_number(estado.strip())):
        codigo = ESTADO_CODIGOS.get(int(estado))
        if codigo is None:
            raise ClientValidationError(f'Estado de verificación inválido: {estado}', 'id_estado_verificacion')
        return codigo
    codigo = str(estado or '').strip().upper()
    if codigo not in ESTADO_CODIGOS.values():
        raise ClientValidationError(f'Estado de verificación inválido: {estado}', 'id_estado_verificacion')
    return codigo


def requiere_observacion(estado) -> bool:
    return estado_codigo(estado) in ESTADOS_CON_OBSERVACION


def check_observacion(estado, observacion) -> str:
    """
    Stripped observacion, or ClientValidationError when the estado needs one
    and it is blank.
    """
    texto = (observacion or '').strip()
    if requiere_observacion(estado) and not texto:
        raise ClientValidationError('La observación es obligatoria para RECHAZADO u OBSERVADO', 'observacion')
    return texto


def parse_altura(value) -> int:
    """
    Positive integer altura. Accepts ints and digit strings ("742").
    """
    if isinstance(value, bool):
        raise ClientValidationError('La altura debe ser un entero positivo', 'altura')
    if isinstance(value, int):
        altura = value
    elif isinstance(value, str) and _ascii_number(value.strip()):
        altura = int(value.strip())
    else:
        raise ClientValidationError('La altura debe ser un entero positivo', 'altura')
    if altura <= 0:
        raise ClientValidationError('La altura debe ser un entero positivo', 'altura')
    return altura


def _filled(value) -> bool:
    return value is not None and str(value).strip() != ''


def domicilio_faltantes(draft: dict) -> list:
    """
    Missing fields of a domicilio draft.

    Selection path: an existing id_dom_barrio. Creation path: departamento,
    localidad and barrio name. Both need calle and a valid altura.
    """
    faltan = []
    if not _filled(draft.get('id_dom_barrio')):
        for field in ('id_dom_departamento', 'id_dom_localidad', 'barrio'):
            if not _filled(draft.get(field)):
                faltan.append(field)
    if not _filled(draft.get('calle')):
        faltan.append('calle')
    try:
        parse_altura(draft.get('altura'))
    except ClientValidationError:
        faltan.append('altura')
    return faltan


def domicilio_completo(draft: dict) -> bool:
    return not domicilio_faltantes(draft)


def titulo_enviable(draft: dict) -> bool:
    """A title draft is submitted only with a tipo and a name."""
    return _filled(draft.get('id_tipo_titulo')) and _filled(draft.get('nombre_titulo'))


def validate_persona(data: dict) -> dict:
    """
    Persona contract: nombre, apellido, sexo non-empty; fecha_nacimiento a
    valid YYYY-MM-DD date; telefono optional, digits with an optional +.

    Returns the cleaned data.
    """
    cleaned = dict(data)
    for field in ('nombre', 'apellido', 'sexo'):
        if not _filled(data.get(field)):
            raise ClientValidationError(f'{field} es obligatorio', field)
        cleaned[field] = str(data[field]).strip()

    fecha = data.get('fecha_nacimiento')
    if not _filled(fecha):
        raise ClientValidationError('fecha_nacimiento es obligatoria', 'fecha_nacimiento')
    try:
        cleaned['fecha_nacimiento'] = isoparse(str(fecha).strip()).date().isoformat()
    except ValueError:
        raise ClientValidationError('fecha_nacimiento inválida', 'fecha_nacimiento')

    telefono = data.get('telefono')
    if _filled(telefono):
        telefono = str(telefono).strip()
        if not TELEFONO_RE.match(telefono):
            raise ClientValidationError('Teléfono inválido', 'telefono')
        cleaned['telefono'] = telefono
    return cleaned


def porcentaje(checklist: Optional[dict]) -> int:
    """round(100 * true flags / boolean flags); 0 for an empty checklist."""
    flags = [value for value in (checklist or {}).values() if isinstance(value, bool)]
    if not flags:
        return 0
    return round(100 * sum(flags) / len(flags))
