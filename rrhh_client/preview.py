"""
File preview loading.

Each load takes a new token; a result whose token is no longer the current
one belongs to a superseded request and is discarded.
"""
import logging

from .api_client import ApiError

logger = logging.getLogger(__name__)


class PreviewLoader:

    def __init__(self, client):
        self.client = client
        self._token = 0
        self.url = None

    def cancel(self):
        """Discard whatever is in flight (target changed or view closed)."""
        self._token += 1
        self.url = None

    def load(self, archivo_id):
        """
        Signed URL of the archivo, or None when the request failed or was
        superseded while in flight.
        """
        self._token += 1
        token = self._token
        try:
            data = self.client.get_signed_url(archivo_id)
        except ApiError as e:
            logger.warning(f"No se pudo cargar la vista previa del archivo {archivo_id}: {e.message}")
            if token == self._token:
                self.url = None
            return None

        if token != self._token:
            logger.debug(f"Vista previa del archivo {archivo_id} descartada")
            return None
        self.url = data['url']
        return self.url
