"""
Domain signals of the Person app.

persona_mutated is sent after any create / delete / state change of a
persona's documents, domicilios, barrios, titles or identification. Receivers
get persona_id, user and cause keyword arguments.
"""
import logging

from django.dispatch import Signal

logger = logging.getLogger(__name__)

persona_mutated = Signal()


def emit_persona_mutated(sender, persona_id, user=None, cause=''):
    logger.debug(f"persona_mutated persona={persona_id} cause={cause}")
    persona_mutated.send(sender=sender, persona_id=persona_id, user=user, cause=cause)
