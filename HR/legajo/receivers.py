"""
Server side legajo recalculation.

Every persona_mutated signal schedules a recalculation that runs once the
mutating transaction has committed. Errors are logged and never reach the
operation that triggered them.
"""
import logging

from django.db import transaction
from django.dispatch import receiver

from HR.person.signals import persona_mutated
from .services import LegajoService

logger = logging.getLogger(__name__)


def recalcular_safely(persona_id, user=None, cause=''):
    try:
        with transaction.atomic():
            resultado = LegajoService.recalcular(persona_id, user)
        logger.debug(f"Legajo {persona_id} recalculado ({cause}): {resultado['estado']}")
        return resultado
    except Exception as e:
        logger.warning(f"No se pudo recalcular el legajo de persona {persona_id} ({cause}): {e}")
        return None


@receiver(persona_mutated, dispatch_uid='legajo_recalcular_on_persona_mutated')
def on_persona_mutated(sender, persona_id, user=None, cause='', **kwargs):
    transaction.on_commit(lambda: recalcular_safely(persona_id, user, cause))
