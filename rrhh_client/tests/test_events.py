from django.test import SimpleTestCase

from rrhh_client.events import EventBus, LegajoRecalculator, PersonaMutated
from rrhh_client.services import LoggingNotifier, RecordingNotifier
from .fakes import FakeResponse, error_envelope, fake_client


class EventBusTest(SimpleTestCase):

    def test_failing_handler_does_not_stop_others(self):
        bus = EventBus()
        received = []

        def broken(event):
            raise RuntimeError('boom')

        bus.subscribe(PersonaMutated, broken)
        bus.subscribe(PersonaMutated, received.append)
        with self.assertLogs('rrhh_client.events', level='ERROR'):
            bus.publish(PersonaMutated(7, 'documentos'))
        self.assertEqual(received, [PersonaMutated(7, 'documentos')])

    def test_recalculator(self):
        client, session = fake_client({('POST', '/legajo/7/recalcular/'): {'estado': 'INCOMPLETO', 'porcentaje': 20}})
        recalculator = LegajoRecalculator(client)
        bus = EventBus()
        bus.subscribe(PersonaMutated, recalculator)
        bus.publish(PersonaMutated(7))
        self.assertEqual(recalculator.last_result['porcentaje'], 20)
        self.assertEqual(session.requests(), [('POST', '/legajo/7/recalcular/')])

    def test_recalculation_failure_is_a_toast_at_most(self):
        client, _ = fake_client({('POST', '/legajo/7/recalcular/'): FakeResponse(403, error_envelope('Acceso denegado'))})
        notifier = RecordingNotifier()
        with self.assertLogs('rrhh_client.events', level='WARNING'):
            EventBus.with_recalculation(client, notifier).publish(PersonaMutated(7))
        self.assertEqual(notifier.kinds(), ['info'])


class LoggingNotifierTest(SimpleTestCase):

    def test_levels(self):
        notifier = LoggingNotifier()
        with self.assertLogs('rrhh_client.services', level='INFO') as logs:
            notifier.notify('warning', 'Completá el domicilio')
            notifier.conflict('Documento duplicado', ['id_tipo_doc: DNI'])
        self.assertEqual([r.levelname for r in logs.records], ['WARNING', 'ERROR'])
