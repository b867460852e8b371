"""
Person Domain Serializers
"""
from .persona_serializers import (
    PersonaSerializer,
    PersonaCreateSerializer,
    PersonaUpdateSerializer,
    PersonaIdentificacionSerializer,
    PersonaIdentificacionWriteSerializer,
)
from .catalogo_serializers import (
    EstadoVerificacionSerializer,
    TipoDocumentoSerializer,
    TipoTituloSerializer,
    DomDepartamentoSerializer,
    DomLocalidadSerializer,
)
from .documento_serializers import (
    PersonaDocumentoSerializer,
    PersonaDocumentoCreateSerializer,
    CambioEstadoSerializer,
)
from .domicilio_serializers import (
    DomBarrioSerializer,
    PersonaBarrioSerializer,
    DomicilioSerializer,
    BarrioCreateSerializer,
    PersonaBarrioAssignSerializer,
    DomicilioCreateSerializer,
)
from .titulo_serializers import TituloSerializer, TituloCreateSerializer
from .archivo_serializers import ArchivoSerializer, ArchivoUploadSerializer
from .eliminacion_serializers import EliminacionSolicitudSerializer, SolicitarEliminacionSerializer

__all__ = [
    'PersonaSerializer',
    'PersonaCreateSerializer',
    'PersonaUpdateSerializer',
    'PersonaIdentificacionSerializer',
    'PersonaIdentificacionWriteSerializer',
    'EstadoVerificacionSerializer',
    'TipoDocumentoSerializer',
    'TipoTituloSerializer',
    'DomDepartamentoSerializer',
    'DomLocalidadSerializer',
    'PersonaDocumentoSerializer',
    'PersonaDocumentoCreateSerializer',
    'CambioEstadoSerializer',
    'DomBarrioSerializer',
    'PersonaBarrioSerializer',
    'DomicilioSerializer',
    'BarrioCreateSerializer',
    'PersonaBarrioAssignSerializer',
    'DomicilioCreateSerializer',
    'TituloSerializer',
    'TituloCreateSerializer',
    'ArchivoSerializer',
    'ArchivoUploadSerializer',
    'EliminacionSolicitudSerializer',
    'SolicitarEliminacionSerializer',
]
