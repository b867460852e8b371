from .persona_service import PersonaService
from .archivo_service import ArchivoService
from .documento_service import DocumentoService
from .domicilio_service import DomicilioService
from .titulo_service import TituloService
from .eliminacion_service import EliminacionService, TargetNotFound

__all__ = [
    'PersonaService',
    'ArchivoService',
    'DocumentoService',
    'DomicilioService',
    'TituloService',
    'EliminacionService',
    'TargetNotFound',
]
