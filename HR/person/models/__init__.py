"""
Person Domain Models

Models:
- Persona / PersonaIdentificacion: identity data and DNI/CUIL
- EstadoVerificacion: verification catalogue (PENDIENTE, APROBADO, RECHAZADO, OBSERVADO)
- Archivo: uploaded files
- TipoDocumento / PersonaDocumento / VerificacionDocumento: documents and their review history
- DomDepartamento / DomLocalidad / DomBarrio / PersonaBarrio / Domicilio: addresses
- TipoTitulo / Titulo / VerificacionTitulo: titles and their review history
- EliminacionSolicitud: deletion requests
"""

from .verificacion import (
    EstadoVerificacion,
    EstadoVerificacionCodigo,
    ESTADO_PENDIENTE_ID,
    requiere_observacion,
    nivel_notificacion,
)
from .persona import Persona, PersonaIdentificacion
from .archivo import Archivo
from .documento import (
    TipoDocumento,
    TipoDocumentoCodigo,
    DOCUMENTOS_OBLIGATORIOS,
    PersonaDocumento,
    VerificacionDocumento,
)
from .domicilio import DomDepartamento, DomLocalidad, DomBarrio, PersonaBarrio, Domicilio
from .titulo import TipoTitulo, Titulo, VerificacionTitulo
from .eliminacion import EliminacionSolicitud

__all__ = [
    'EstadoVerificacion',
    'EstadoVerificacionCodigo',
    'ESTADO_PENDIENTE_ID',
    'requiere_observacion',
    'nivel_notificacion',
    'Persona',
    'PersonaIdentificacion',
    'Archivo',
    'TipoDocumento',
    'TipoDocumentoCodigo',
    'DOCUMENTOS_OBLIGATORIOS',
    'PersonaDocumento',
    'VerificacionDocumento',
    'DomDepartamento',
    'DomLocalidad',
    'DomBarrio',
    'PersonaBarrio',
    'Domicilio',
    'TipoTitulo',
    'Titulo',
    'VerificacionTitulo',
    'EliminacionSolicitud',
]
