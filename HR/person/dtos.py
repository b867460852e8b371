"""
Data Transfer Objects for the Person domain.

Write serializers build these; services consume them.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union


@dataclass
class PersonaCreateDTO:
    nombre: str
    apellido: str
    fecha_nacimiento: date
    sexo: str
    telefono: Optional[str] = ''
    email: Optional[str] = ''
    usuario_id: Optional[int] = None


@dataclass
class PersonaUpdateDTO:
    persona_id: int
    nombre: Optional[str] = None
    apellido: Optional[str] = None
    fecha_nacimiento: Optional[date] = None
    sexo: Optional[str] = None
    telefono: Optional[str] = None
    email: Optional[str] = None


@dataclass
class IdentificacionDTO:
    persona_id: int
    dni: Optional[str] = None
    cuil: Optional[str] = None


@dataclass
class DocumentoCreateDTO:
    persona_id: int
    id_tipo_doc: Union[int, str]
    id_archivo: Optional[int] = None
    id_estado_verificacion: Optional[Union[int, str]] = None
    observacion: Optional[str] = ''
    vigente: bool = True


@dataclass
class CambioEstadoDTO:
    """State change of a document or title."""
    entity_id: int
    id_estado_verificacion: Union[int, str]
    observacion: Optional[str] = ''


@dataclass
class BarrioCreateDTO:
    id_dom_localidad: int
    barrio: str
    manzana: Optional[str] = ''
    casa: Optional[str] = ''
    departamento: Optional[str] = ''
    piso: Optional[str] = ''


@dataclass
class DomicilioCreateDTO:
    persona_id: int
    calle: str
    altura: int
    id_dom_barrio: int


@dataclass
class TituloCreateDTO:
    persona_id: int
    id_tipo_titulo: int
    nombre_titulo: str
    institucion: Optional[str] = ''
    fecha_emision: Optional[date] = None
    matricula_prof: Optional[str] = ''
    id_archivo: Optional[int] = None
    id_estado_verificacion: Optional[Union[int, str]] = None
    observacion: Optional[str] = ''


@dataclass
class EliminacionSolicitudDTO:
    tipo: str
    objetivo_id: int
    motivo: Optional[str] = None
