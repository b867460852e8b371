"""
PersonaMutated event bus.

Every sub-entity mutation publishes PersonaMutated; LegajoRecalculator
subscribes and recalculates the legajo best-effort.
"""
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Optional

from .api_client import ApiError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersonaMutated:
    persona_id: int
    origen: Optional[str] = None


class EventBus:

    def __init__(self):
        self._handlers = defaultdict(list)

    def subscribe(self, event_type, handler):
        self._handlers[event_type].append(handler)

    def publish(self, event):
        """
        Call every handler of the event type. A failing handler is logged
        and does not stop the others.
        """
        for handler in list(self._handlers[type(event)]):
            try:
                handler(event)
            except Exception:
                logger.exception(f"Handler {handler!r} failed for {event!r}")

    @classmethod
    def with_recalculation(cls, client, notifier=None):
        bus = cls()
        bus.subscribe(PersonaMutated, LegajoRecalculator(client, notifier))
        return bus


class LegajoRecalculator:
    """Recalculates the legajo of the mutated persona."""

    def __init__(self, client, notifier=None):
        self.client = client
        self.notifier = notifier
        self.last_result = None

    def __call__(self, event: PersonaMutated):
        try:
            self.last_result = self.client.recalcular_legajo(event.persona_id)
        except ApiError as e:
            logger.warning(f"No se pudo recalcular el legajo de persona {event.persona_id}: {e.message}")
            if self.notifier is not None:
                self.notifier.notify('info', 'No se pudo actualizar el estado del legajo')
