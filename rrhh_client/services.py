"""
Notifier and Confirmer: the user-facing collaborators of the workflow layer.
"""
import logging

logger = logging.getLogger(__name__)


class Notifier:
    """Shows messages to the user."""

    def notify(self, kind: str, message: str):
        raise NotImplementedError

    def conflict(self, message: str, details=None):
        """Business rule conflicts; they need the user to rethink the input."""
        self.notify('error', message)


class LoggingNotifier(Notifier):
    """Writes every message to the log."""

    _LEVELS = {'success': logging.INFO, 'info': logging.INFO, 'warning': logging.WARNING, 'error': logging.ERROR}

    def notify(self, kind, message):
        logger.log(self._LEVELS.get(kind, logging.INFO), f"[{kind}] {message}")

    def conflict(self, message, details=None):
        logger.error(f"[conflict] {message} {details or ''}".rstrip())


class RecordingNotifier(Notifier):
    """Keeps messages in memory as (kind, message) tuples."""

    def __init__(self):
        self.messages = []
        self.conflicts = []

    def notify(self, kind, message):
        self.messages.append((kind, message))

    def conflict(self, message, details=None):
        self.conflicts.append((message, list(details or [])))

    def kinds(self):
        return [kind for kind, _ in self.messages]


class Confirmer:
    """Asks the user a yes/no question."""

    def confirm(self, prompt: str) -> bool:
        raise NotImplementedError


class FixedConfirmer(Confirmer):
    """Always gives the same answer; records the prompts."""

    def __init__(self, answer=True):
        self.answer = answer
        self.prompts = []

    def confirm(self, prompt):
        self.prompts.append(prompt)
        return self.answer
