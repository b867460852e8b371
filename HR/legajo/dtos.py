from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class EstadoManualDTO:
    persona_id: int
    codigo: str


@dataclass
class PlazoGraciaDTO:
    persona_id: int
    fecha_limite: date
    motivo: Optional[str] = None
