"""
Registration wizard: Documentos (1) -> Domicilio (2) -> Título (3).

Step 2 only collects a draft; nothing is persisted until finish(), which
runs the writes in order and stops at the first failure. Writes already
done are kept and skipped when finish() is retried.
"""
import logging

from .api_client import ApiConflictError, ApiError
from .events import EventBus, PersonaMutated
from .rules import domicilio_faltantes, parse_altura, titulo_enviable

logger = logging.getLogger(__name__)

FALLBACK_ERROR = 'No se pudo finalizar el registro'

STEP_DOCUMENTOS = 1
STEP_DOMICILIO = 2
STEP_TITULO = 3

_BARRIO_EXTRA_FIELDS = ('manzana', 'casa', 'departamento', 'piso')


class RegistrationWizard:

    def __init__(self, client, persona_id, notifier, events: EventBus = None, on_finish=None):
        self.client = client
        self.persona_id = persona_id
        self.notifier = notifier
        self.events = events if events is not None else EventBus.with_recalculation(client)
        self.on_finish = on_finish

        self.step = STEP_DOCUMENTOS
        self.docs_uploaded = []
        self.domicilio_draft = {}
        self.titulo_draft = {}
        self.titulo_archivo = None
        self.titulo_archivo_id = None
        self.barrio_asignado = None
        self.domicilio_id = None
        self.finished = False
        self.error = None

    # step 1

    def refresh_docs(self):
        """Type codes of the documents already loaded."""
        documentos = self.client.list_documentos(self.persona_id)
        self.docs_uploaded = sorted({doc['tipo_codigo'] for doc in documentos})
        return self.docs_uploaded

    def upload_documento(self, tipo_codigo, filename, content, content_type='application/octet-stream'):
        """Upload a file and register it as a document of the given type."""
        try:
            archivo = self.client.upload_archivo(self.persona_id, filename, content, content_type)
            documento = self.client.create_documento(self.persona_id, {
                'id_tipo_doc': tipo_codigo,
                'id_archivo': archivo['id'],
            })
        except ApiError as e:
            self.notifier.notify('error', e.message or 'No se pudo subir el documento')
            return None
        self.events.publish(PersonaMutated(self.persona_id, 'documentos'))
        if tipo_codigo not in self.docs_uploaded:
            self.docs_uploaded = sorted(self.docs_uploaded + [tipo_codigo])
        return documento

    # step 2

    def set_domicilio_draft(self, **fields):
        """
        Update the domicilio draft. Either id_dom_barrio (existing barrio) or
        id_dom_departamento, id_dom_localidad and barrio (new barrio) plus
        calle and altura.
        """
        self.domicilio_draft.update(fields)
        return self.domicilio_draft

    @property
    def barrio_nuevo(self):
        """Barrio to create on finish, None when an existing one is selected."""
        draft = self.domicilio_draft
        if draft.get('id_dom_barrio'):
            return None
        barrio = {'barrio': str(draft.get('barrio') or '').strip()}
        for field in _BARRIO_EXTRA_FIELDS:
            if draft.get(field):
                barrio[field] = draft[field]
        return barrio

    # step 3

    def set_titulo_draft(self, archivo=None, **fields):
        """archivo: (filename, content[, content_type]) uploaded before the title."""
        self.titulo_draft.update(fields)
        if archivo is not None:
            self.titulo_archivo = archivo
            self.titulo_archivo_id = None
        return self.titulo_draft

    # navigation

    def can_next(self) -> bool:
        if self.step == STEP_DOCUMENTOS:
            return True
        if self.step == STEP_DOMICILIO:
            return not domicilio_faltantes(self.domicilio_draft)
        return False

    def next(self) -> bool:
        if not self.can_next():
            if self.step == STEP_DOMICILIO:
                faltan = ', '.join(domicilio_faltantes(self.domicilio_draft))
                self.notifier.notify('warning', f'Completá el domicilio: {faltan}')
            return False
        self.step += 1
        return True

    def back(self) -> bool:
        if self.step == STEP_DOCUMENTOS:
            return False
        self.step -= 1
        return True

    # submission

    def finish(self) -> bool:
        """
        a) create the barrio when new, assign it to the persona
        b) create the domicilio
        c) create the título when it has a tipo and a name
        d) recalculate the legajo (best-effort, through PersonaMutated)
        e) mark the wizard finished
        """
        if self.finished:
            return True

        faltan = domicilio_faltantes(self.domicilio_draft)
        if faltan:
            self.notifier.notify('warning', f'Completá el domicilio: {", ".join(faltan)}')
            return False

        self.error = None
        try:
            barrio_id = self._save_barrio()
            self._save_domicilio(barrio_id)
            self._save_titulo()
        except ApiError as e:
            self.error = e.message or FALLBACK_ERROR
            logger.warning(f"Registro de persona {self.persona_id} incompleto: {self.error}")
            if isinstance(e, ApiConflictError):
                self.notifier.conflict(self.error, e.details)
            else:
                self.notifier.notify('error', self.error)
            return False

        self.events.publish(PersonaMutated(self.persona_id, 'registro'))

        self.finished = True
        self.notifier.notify('success', 'Registro finalizado')
        if self.on_finish is not None:
            self.on_finish(self.persona_id)
        return True

    def _save_barrio(self):
        draft = self.domicilio_draft
        barrio_id = draft.get('id_dom_barrio')
        if not barrio_id:
            barrio = self.client.create_barrio(draft['id_dom_localidad'], self.barrio_nuevo)
            barrio_id = barrio['id']
            # finish() may be retried after a later step fails
            draft['id_dom_barrio'] = barrio_id
        if self.barrio_asignado != barrio_id:
            self.client.assign_barrio(self.persona_id, barrio_id)
            self.barrio_asignado = barrio_id
        return barrio_id

    def _save_domicilio(self, barrio_id):
        if self.domicilio_id is not None:
            return
        domicilio = self.client.create_domicilio(self.persona_id, {
            'calle': str(self.domicilio_draft['calle']).strip(),
            'altura': parse_altura(self.domicilio_draft['altura']),
            'id_dom_barrio': barrio_id,
        })
        self.domicilio_id = domicilio['id']

    def _save_titulo(self):
        draft = self.titulo_draft
        if not titulo_enviable(draft):
            return None
        payload = {
            'id_persona': self.persona_id,
            'id_tipo_titulo': draft['id_tipo_titulo'],
            'nombre_titulo': str(draft['nombre_titulo']).strip(),
        }
        for field in ('institucion', 'fecha_emision', 'matricula_prof'):
            if draft.get(field):
                payload[field] = draft[field]
        if self.titulo_archivo is not None:
            if self.titulo_archivo_id is None:
                archivo = self.client.upload_archivo(self.persona_id, *self.titulo_archivo)
                self.titulo_archivo_id = archivo['id']
            payload['id_archivo'] = self.titulo_archivo_id
        return self.client.create_titulo(payload)
