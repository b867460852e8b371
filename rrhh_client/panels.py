"""
CRUD panels for the sub-entities of a persona: documentos, títulos and
domicilios.

A panel lists through the QueryCache, validates input before any request,
uploads the attached file before creating, and applies state changes and
deletions optimistically. Every mutation invalidates the cached list and
publishes PersonaMutated.
"""
import logging

from .api_client import ApiConflictError, ApiError
from .cache import QueryCache
from .estados import nivel_notificacion
from .events import EventBus, PersonaMutated
from .rules import ClientValidationError, check_observacion, estado_codigo, parse_altura
from .services import Confirmer, Notifier

logger = logging.getLogger(__name__)

MOTIVO_MAX_LENGTH = 300


class EntityPanel:
    """Shared behaviour; subclasses plug in the endpoints."""

    nombre = ''
    etiqueta = 'registro'
    supports_archivo = False
    supports_estado = False

    def __init__(self, client, persona_id, notifier: Notifier, confirmer: Confirmer,
                 cache: QueryCache = None, events: EventBus = None,
                 can_delete=False, can_change_state=False, privileged=False):
        self.client = client
        self.persona_id = persona_id
        self.notifier = notifier
        self.confirmer = confirmer
        self.cache = cache if cache is not None else QueryCache()
        self.events = events if events is not None else EventBus.with_recalculation(client)
        self.can_delete = can_delete
        self.can_change_state = can_change_state and self.supports_estado
        self.privileged = privileged

    @property
    def key(self):
        return (self.nombre, self.persona_id)

    # endpoint hooks

    def _load(self):
        raise NotImplementedError

    def _create(self, payload):
        raise NotImplementedError

    def _change_state(self, entity_id, codigo, observacion):
        raise NotImplementedError

    def _delete(self, entity_id):
        raise NotImplementedError

    def _solicitar_eliminacion(self, entity_id, motivo):
        raise NotImplementedError

    def validate(self, payload: dict) -> dict:
        """Cleaned create payload; ClientValidationError when invalid."""
        return payload

    # operations

    def list(self, refresh=False):
        return self.cache.fetch(self.key, self._load, refresh=refresh)

    def create(self, payload: dict, archivo=None):
        """
        Create the entity. archivo is (filename, content[, content_type]);
        it is uploaded first and a failed upload aborts the create.
        Returns the created row or None.
        """
        try:
            payload = self.validate(dict(payload))
        except ClientValidationError as e:
            self.notifier.notify('warning', e.message)
            return None

        if archivo is not None and self.supports_archivo:
            try:
                subido = self.client.upload_archivo(self.persona_id, *archivo)
            except ApiError as e:
                self._report(e, 'No se pudo subir el archivo')
                return None
            payload['id_archivo'] = subido['id']

        try:
            creado = self._create(payload)
        except ApiError as e:
            self._report(e, f'No se pudo guardar el {self.etiqueta}')
            return None

        self._mutated()
        self.notifier.notify('success', f'{self.etiqueta.capitalize()} guardado')
        return creado

    def change_state(self, entity_id, estado, observacion=''):
        """Set the verification state; RECHAZADO and OBSERVADO need an observacion."""
        if not self.can_change_state:
            self.notifier.notify('warning', 'No tenés permiso para cambiar el estado')
            return None
        try:
            codigo = estado_codigo(estado)
            observacion = check_observacion(codigo, observacion)
        except ClientValidationError as e:
            self.notifier.notify('warning', e.message)
            return None

        def patch(rows):
            for row in rows:
                if row.get('id') == entity_id:
                    row['estado_codigo'] = codigo
                    row['observacion'] = observacion
            return rows

        try:
            actualizado = self.cache.mutate_optimistic(
                self.key, patch, lambda: self._change_state(entity_id, codigo, observacion)
            )
        except ApiError as e:
            self._report(e, 'No se pudo cambiar el estado')
            return None

        self._mutated()
        self.notifier.notify(nivel_notificacion(codigo), f'Estado actualizado a {codigo}')
        return actualizado

    def remove(self, entity_id, motivo=None):
        """Delete when allowed, otherwise file a deletion request."""
        if self.can_delete:
            return self.delete(entity_id)
        return self.request_deletion(entity_id, motivo)

    def delete(self, entity_id):
        """
        Delete after confirmation. Returns True when deleted, False when the
        user declined or the request failed.
        """
        if not self.can_delete:
            self.notifier.notify('warning', 'No tenés permiso para eliminar; podés solicitar la eliminación')
            return False
        if not self.confirmer.confirm(f'¿Eliminar este {self.etiqueta}?'):
            return False

        try:
            self.cache.mutate_optimistic(
                self.key,
                lambda rows: [row for row in rows if row.get('id') != entity_id],
                lambda: self._delete(entity_id),
            )
        except ApiError as e:
            self._report(e, f'No se pudo eliminar el {self.etiqueta}')
            return False

        self._mutated()
        self.notifier.notify('success', f'{self.etiqueta.capitalize()} eliminado')
        return True

    def request_deletion(self, entity_id, motivo=None):
        """
        File an EliminacionSolicitud; the entity stays untouched until a
        reviewer acts. Blank motivo is sent as null.
        """
        motivo = (motivo or '').strip() or None
        if motivo and len(motivo) > MOTIVO_MAX_LENGTH:
            self.notifier.notify('warning', f'El motivo admite hasta {MOTIVO_MAX_LENGTH} caracteres')
            return None
        try:
            solicitud = self._solicitar_eliminacion(entity_id, motivo)
        except ApiError as e:
            self._report(e, 'No se pudo enviar la solicitud de eliminación')
            return None
        self.notifier.notify('info', 'Solicitud de eliminación enviada')
        return solicitud

    # helpers

    def _mutated(self):
        self.cache.invalidate(self.key)
        self.events.publish(PersonaMutated(self.persona_id, self.nombre))

    def _report(self, error: ApiError, fallback: str):
        logger.info(f"{self.nombre} persona {self.persona_id}: {error.message or fallback}")
        if isinstance(error, ApiConflictError):
            self.notifier.conflict(error.message or fallback, error.details)
        else:
            self.notifier.notify('error', error.message or fallback)


class VerificablePanel(EntityPanel):
    """Documentos and títulos: uploaded file and verification state."""

    supports_archivo = True
    supports_estado = True

    def validate(self, payload):
        estado = payload.get('id_estado_verificacion')
        if not self.privileged:
            payload.pop('id_estado_verificacion', None)
            payload.pop('observacion', None)
            return payload
        if estado in (None, ''):
            raise ClientValidationError('Seleccioná un estado de verificación', 'id_estado_verificacion')
        payload['observacion'] = check_observacion(estado, payload.get('observacion'))
        return payload


class DocumentosPanel(VerificablePanel):
    nombre = 'documentos'
    etiqueta = 'documento'

    def validate(self, payload):
        if not str(payload.get('id_tipo_doc') or '').strip():
            raise ClientValidationError('Seleccioná el tipo de documento', 'id_tipo_doc')
        return super().validate(payload)

    def _load(self):
        return self.client.list_documentos(self.persona_id)

    def _create(self, payload):
        return self.client.create_documento(self.persona_id, payload)

    def _change_state(self, entity_id, codigo, observacion):
        return self.client.change_documento_estado(entity_id, codigo, observacion)

    def _delete(self, entity_id):
        return self.client.delete_documento(self.persona_id, entity_id)

    def _solicitar_eliminacion(self, entity_id, motivo):
        return self.client.solicitar_eliminacion_documento(entity_id, motivo)


class TitulosPanel(VerificablePanel):
    nombre = 'titulos'
    etiqueta = 'título'

    def validate(self, payload):
        if not str(payload.get('id_tipo_titulo') or '').strip():
            raise ClientValidationError('El tipo de título es obligatorio', 'id_tipo_titulo')
        if not str(payload.get('nombre_titulo') or '').strip():
            raise ClientValidationError('El nombre del título es obligatorio', 'nombre_titulo')
        payload['id_persona'] = self.persona_id
        return super().validate(payload)

    def _load(self):
        return self.client.list_titulos(self.persona_id)

    def _create(self, payload):
        return self.client.create_titulo(payload)

    def _change_state(self, entity_id, codigo, observacion):
        return self.client.change_titulo_estado(entity_id, codigo, observacion)

    def _delete(self, entity_id):
        return self.client.delete_titulo(self.persona_id, entity_id)

    def _solicitar_eliminacion(self, entity_id, motivo):
        return self.client.solicitar_eliminacion_titulo(entity_id, motivo)


class DomiciliosPanel(EntityPanel):
    nombre = 'domicilios'
    etiqueta = 'domicilio'

    def validate(self, payload):
        if not str(payload.get('calle') or '').strip():
            raise ClientValidationError('La calle es obligatoria', 'calle')
        payload['calle'] = payload['calle'].strip()
        payload['altura'] = parse_altura(payload.get('altura'))
        if not payload.get('id_dom_barrio'):
            raise ClientValidationError('Debés seleccionar o crear un barrio', 'id_dom_barrio')
        return payload

    def _load(self):
        return self.client.list_domicilios(self.persona_id)

    def _create(self, payload):
        return self.client.create_domicilio(self.persona_id, payload)

    def _delete(self, entity_id):
        return self.client.delete_domicilio(self.persona_id, entity_id)

    def _solicitar_eliminacion(self, entity_id, motivo):
        return self.client.solicitar_eliminacion_domicilio(entity_id, motivo)
