"""
Workflow client for the RRHH legajo API.

RRHHClient talks HTTP; RegistrationWizard and the panels hold the
registration and CRUD flows on top of it.
"""
from .api_client import (
    ApiConflictError,
    ApiConnectionError,
    ApiError,
    ApiPermissionError,
    ApiValidationError,
    NotFoundError,
    RRHHClient,
    ServerError,
)
from .cache import QueryCache
from .events import EventBus, LegajoRecalculator, PersonaMutated
from .panels import DocumentosPanel, DomiciliosPanel, TitulosPanel
from .preview import PreviewLoader
from .rules import ClientValidationError
from .services import Confirmer, FixedConfirmer, LoggingNotifier, Notifier, RecordingNotifier
from .wizard import RegistrationWizard

__all__ = [
    'ApiConflictError', 'ApiConnectionError', 'ApiError', 'ApiPermissionError',
    'ApiValidationError', 'NotFoundError', 'RRHHClient', 'ServerError',
    'QueryCache', 'EventBus', 'LegajoRecalculator', 'PersonaMutated',
    'DocumentosPanel', 'DomiciliosPanel', 'TitulosPanel', 'PreviewLoader',
    'ClientValidationError', 'Confirmer', 'FixedConfirmer', 'LoggingNotifier',
    'Notifier', 'RecordingNotifier', 'RegistrationWizard',
]
