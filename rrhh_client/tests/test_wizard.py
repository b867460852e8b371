"""Registration wizard against a recording fake transport."""
from django.test import SimpleTestCase

from rrhh_client.events import EventBus
from rrhh_client.services import RecordingNotifier
from rrhh_client.wizard import FALLBACK_ERROR, RegistrationWizard
from .fakes import FakeResponse, error_envelope, fake_client

PERSONA_ID = 7

NUEVO_BARRIO = {
    'id_dom_departamento': 1,
    'id_dom_localidad': 2,
    'barrio': 'Alberdi',
    'calle': 'Av. Siempre Viva',
    'altura': '742',
}


class WizardTestCase(SimpleTestCase):

    def setUp(self):
        self.client, self.session = fake_client({
            ('GET', f'/personas/{PERSONA_ID}/documentos/'): {'count': 2, 'results': [
                {'id': 1, 'tipo_codigo': 'DNI'}, {'id': 2, 'tipo_codigo': 'CUIL'}, {'id': 3, 'tipo_codigo': 'DNI'},
            ]},
            ('POST', '/dom-otros/localidades/2/barrios/'): {'id': 30, 'barrio': 'Alberdi'},
            ('POST', f'/personas/{PERSONA_ID}/barrios/'): {'id': 1, 'id_dom_barrio': 30},
            ('POST', f'/personas/{PERSONA_ID}/domicilios/'): {'id': 11},
            ('POST', f'/personas/{PERSONA_ID}/documentos/'): {'id': 13, 'tipo_codigo': 'DOM'},
            ('POST', '/titulos/'): {'id': 12},
            ('POST', f'/archivos/persona/{PERSONA_ID}/'): {'id': 40},
            ('POST', f'/legajo/{PERSONA_ID}/recalcular/'): {'estado': 'PENDIENTE', 'porcentaje': 60},
        })
        self.notifier = RecordingNotifier()
        self.finished_for = []
        self.wizard = RegistrationWizard(self.client, PERSONA_ID, self.notifier, on_finish=self.finished_for.append)

    def at_step_3(self, **domicilio):
        self.wizard.next()
        self.wizard.set_domicilio_draft(**domicilio)
        self.assertTrue(self.wizard.next())
        self.assertEqual(self.wizard.step, 3)

    def posts(self):
        return [path for _, path in self.session.requests('POST')]


class NavigationTest(WizardTestCase):

    def test_step_1_advances_without_documents(self):
        self.assertTrue(self.wizard.can_next())
        self.assertTrue(self.wizard.next())
        self.assertEqual(self.wizard.step, 2)
        self.assertEqual(self.session.calls, [])

    def test_docs_uploaded_codes(self):
        self.assertEqual(self.wizard.refresh_docs(), ['CUIL', 'DNI'])

    def test_upload_documento(self):
        self.wizard.upload_documento('DOM', 'luz.pdf', b'%PDF')
        self.assertEqual(self.posts()[:2], [f'/archivos/persona/{PERSONA_ID}/', f'/personas/{PERSONA_ID}/documentos/'])
        self.assertIn('DOM', self.wizard.docs_uploaded)

    def test_empty_barrio_name_blocks_step_2(self):
        self.wizard.next()
        self.wizard.set_domicilio_draft(**{**NUEVO_BARRIO, 'barrio': ''})
        self.assertFalse(self.wizard.can_next())
        self.assertFalse(self.wizard.next())
        self.assertEqual(self.wizard.step, 2)
        self.assertEqual(self.notifier.kinds(), ['warning'])
        self.assertEqual(self.session.calls, [])

    def test_both_barrio_paths_gate_on_calle_and_altura(self):
        for draft in (NUEVO_BARRIO, {'id_dom_barrio': 30, 'calle': 'Av. Siempre Viva', 'altura': '742'}):
            for broken in ({'calle': ''}, {'altura': '0'}, {'altura': 's/n'}):
                wizard = RegistrationWizard(self.client, PERSONA_ID, self.notifier)
                wizard.next()
                wizard.set_domicilio_draft(**{**draft, **broken})
                self.assertFalse(wizard.can_next(), (draft, broken))
                wizard.set_domicilio_draft(**draft)
                self.assertTrue(wizard.can_next())

    def test_nothing_persisted_in_step_2(self):
        self.at_step_3(**NUEVO_BARRIO)
        self.assertEqual(self.session.calls, [])
        self.assertEqual(self.wizard.barrio_nuevo, {'barrio': 'Alberdi'})

    def test_back(self):
        self.assertFalse(self.wizard.back())
        self.at_step_3(**NUEVO_BARRIO)
        self.assertTrue(self.wizard.back())
        self.assertEqual(self.wizard.step, 2)
        self.assertTrue(self.wizard.can_next())


class FinishTest(WizardTestCase):

    def test_new_barrio_domicilio_and_titulo(self):
        self.at_step_3(**NUEVO_BARRIO, manzana='B')
        self.wizard.set_titulo_draft(id_tipo_titulo=2, nombre_titulo='Enfermería', archivo=('t.pdf', b'%PDF'))

        self.assertTrue(self.wizard.finish())
        self.assertEqual(self.posts(), [
            '/dom-otros/localidades/2/barrios/',
            f'/personas/{PERSONA_ID}/barrios/',
            f'/personas/{PERSONA_ID}/domicilios/',
            f'/archivos/persona/{PERSONA_ID}/',
            '/titulos/',
            f'/legajo/{PERSONA_ID}/recalcular/',
        ])
        calls = self.session.calls
        self.assertEqual(calls[0].json, {'barrio': 'Alberdi', 'manzana': 'B'})
        self.assertEqual(calls[2].json, {'calle': 'Av. Siempre Viva', 'altura': 742, 'id_dom_barrio': 30})
        self.assertEqual(calls[4].json['id_archivo'], 40)
        self.assertTrue(self.wizard.finished)
        self.assertEqual(self.finished_for, [PERSONA_ID])

    def test_existing_barrio_skips_creation(self):
        self.at_step_3(id_dom_barrio=30, calle='Mitre', altura=10)
        self.assertTrue(self.wizard.finish())
        self.assertNotIn('/dom-otros/localidades/2/barrios/', self.posts())

    def test_incomplete_titulo_is_skipped_and_legajo_recalculated(self):
        self.at_step_3(**NUEVO_BARRIO)
        self.wizard.set_titulo_draft(id_tipo_titulo=2, nombre_titulo='')

        self.assertTrue(self.wizard.finish())
        posts = self.posts()
        self.assertIn(f'/personas/{PERSONA_ID}/domicilios/', posts)
        self.assertNotIn('/titulos/', posts)
        self.assertEqual(posts[-1], f'/legajo/{PERSONA_ID}/recalcular/')

    def test_recalculation_failure_does_not_block(self):
        self.session.route('POST', f'/legajo/{PERSONA_ID}/recalcular/', FakeResponse(500, error_envelope('db caída')))
        self.at_step_3(**NUEVO_BARRIO)
        with self.assertLogs('rrhh_client.events', level='WARNING'):
            self.assertTrue(self.wizard.finish())
        self.assertTrue(self.wizard.finished)

    def test_server_message_surfaced_and_later_steps_skipped(self):
        self.session.route('POST', f'/personas/{PERSONA_ID}/domicilios/',
                           FakeResponse(400, error_envelope('calle: Asegúrese de que no tenga más de 120 caracteres')))
        self.at_step_3(**NUEVO_BARRIO)
        self.wizard.set_titulo_draft(id_tipo_titulo=2, nombre_titulo='Enfermería')

        self.assertFalse(self.wizard.finish())
        self.assertEqual(self.notifier.messages[-1],
                         ('error', 'calle: Asegúrese de que no tenga más de 120 caracteres'))
        posts = self.posts()
        self.assertNotIn('/titulos/', posts)
        self.assertNotIn(f'/legajo/{PERSONA_ID}/recalcular/', posts)
        self.assertFalse(self.wizard.finished)
        self.assertEqual(self.finished_for, [])
        # the barrio already created is reused on retry
        self.assertEqual(self.wizard.domicilio_draft['id_dom_barrio'], 30)

    def test_fallback_message(self):
        self.session.route('POST', f'/personas/{PERSONA_ID}/barrios/', FakeResponse(500))
        self.at_step_3(**NUEVO_BARRIO)
        self.assertFalse(self.wizard.finish())
        self.assertEqual(self.notifier.messages[-1], ('error', FALLBACK_ERROR))

    def test_custom_event_bus(self):
        events = EventBus()
        wizard = RegistrationWizard(self.client, PERSONA_ID, self.notifier, events=events)
        wizard.next()
        wizard.set_domicilio_draft(id_dom_barrio=30, calle='Mitre', altura=10)
        wizard.next()
        self.assertTrue(wizard.finish())
        self.assertNotIn(f'/legajo/{PERSONA_ID}/recalcular/', self.posts())


class RetryTest(WizardTestCase):

    def test_retry_after_titulo_failure_keeps_earlier_writes(self):
        self.session.route('POST', '/titulos/', FakeResponse(500, error_envelope('db caída')))
        self.at_step_3(**NUEVO_BARRIO)
        self.wizard.set_titulo_draft(id_tipo_titulo=2, nombre_titulo='Enfermería', archivo=('t.pdf', b'%PDF'))
        self.assertFalse(self.wizard.finish())
        self.assertEqual(self.wizard.domicilio_id, 11)

        self.session.route('POST', '/titulos/', {'id': 12})
        self.assertTrue(self.wizard.finish())

        posts = self.posts()
        self.assertEqual(posts.count('/dom-otros/localidades/2/barrios/'), 1)
        self.assertEqual(posts.count(f'/personas/{PERSONA_ID}/barrios/'), 1)
        self.assertEqual(posts.count(f'/personas/{PERSONA_ID}/domicilios/'), 1)
        self.assertEqual(posts.count(f'/archivos/persona/{PERSONA_ID}/'), 1)
        self.assertEqual(posts.count('/titulos/'), 2)
        self.assertEqual(self.session.calls[-2].json['id_archivo'], 40)

    def test_finish_again_after_success_writes_nothing(self):
        self.at_step_3(id_dom_barrio=30, calle='Mitre', altura=10)
        self.assertTrue(self.wizard.finish())
        calls = len(self.session.calls)

        self.assertTrue(self.wizard.finish())
        self.assertEqual(len(self.session.calls), calls)
        self.assertEqual(self.finished_for, [PERSONA_ID])

    def test_non_ascii_altura_blocks_without_crashing(self):
        self.wizard.next()
        self.wizard.set_domicilio_draft(id_dom_barrio=3, calle='X', altura='²')
        self.assertFalse(self.wizard.can_next())
        self.assertFalse(self.wizard.finish())
        self.assertEqual(self.notifier.kinds(), ['warning'])
        self.assertEqual(self.session.calls, [])
