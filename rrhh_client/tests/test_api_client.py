"""Tests for RRHHClient: envelope handling and error mapping."""
from django.test import SimpleTestCase
from requests.exceptions import ConnectionError, Timeout

from rrhh_client.api_client import (
    ApiConflictError,
    ApiConnectionError,
    ApiError,
    ApiPermissionError,
    ApiValidationError,
    NotFoundError,
    ServerError,
    error_items,
)
from .fakes import FakeResponse, error_envelope, fake_client


class EnvelopeTest(SimpleTestCase):

    def test_unwraps_data(self):
        client, session = fake_client({('GET', '/personas/7/'): {'id': 7, 'nombre': 'Ana'}})
        self.assertEqual(client.get_persona(7), {'id': 7, 'nombre': 'Ana'})
        self.assertEqual(session.headers['Authorization'], 'Bearer test-token')

    def test_paginated_list(self):
        client, session = fake_client({
            ('GET', '/personas/7/documentos/'): {'count': 1, 'next': None, 'previous': None, 'results': [{'id': 1}]},
        })
        self.assertEqual(client.list_documentos(7, solo_vigentes=True), [{'id': 1}])
        self.assertEqual(session.calls[0].params, {'page_size': 100, 'vigentes': 1})

    def test_plain_list(self):
        client, _ = fake_client({('GET', '/titulos/'): [{'id': 3}]})
        self.assertEqual(client.list_titulos(7), [{'id': 3}])

    def test_no_content(self):
        client, _ = fake_client({('DELETE', '/personas/7/barrios/2/'): FakeResponse(204)})
        self.assertIsNone(client.unassign_barrio(7, 2))

    def test_upload_is_multipart(self):
        client, session = fake_client({('POST', '/archivos/persona/7/'): {'id': 40}})
        client.upload_archivo(7, 'dni.pdf', b'%PDF', 'application/pdf')
        call = session.calls[0]
        self.assertEqual(call.files, {'archivo': ('dni.pdf', b'%PDF', 'application/pdf')})
        self.assertIsNone(call.json)

    def test_login_keeps_token(self):
        client, session = fake_client({
            ('POST', '/auth/login/'): {'user': {'id': 1}, 'tokens': {'access': 'abc', 'refresh': 'def'}},
        })
        client.session.headers.clear()
        client.login('ana@test.com', 'secret')
        self.assertEqual(session.headers['Authorization'], 'Bearer abc')


class ErrorMappingTest(SimpleTestCase):

    def assertRaisesFor(self, status_code, body, error_class):
        client, _ = fake_client({('GET', '/personas/1/'): FakeResponse(status_code, body)})
        with self.assertRaises(error_class) as ctx:
            client.get_persona(1)
        self.assertEqual(ctx.exception.status_code, status_code)
        return ctx.exception

    def test_validation_error_items(self):
        error = self.assertRaisesFor(
            400, error_envelope('calle: Requerido; altura: Inválida', ['calle: Requerido', 'altura: Inválida']),
            ApiValidationError,
        )
        self.assertEqual(error.details, ['calle: Requerido', 'altura: Inválida'])
        self.assertEqual(error.message, 'calle: Requerido; altura: Inválida')

    def test_unprocessable_missing_fields(self):
        error = self.assertRaisesFor(422, {'missingFields': ['nombre', 'sexo']}, ApiValidationError)
        self.assertEqual(error.details, ['nombre: campo requerido', 'sexo: campo requerido'])

    def test_conflict(self):
        error = self.assertRaisesFor(409, {'error': 'Fechas superpuestas', 'detalle': 'Ya existe un contrato'},
                                     ApiConflictError)
        self.assertEqual(error.message, 'Ya existe un contrato')

    def test_status_classes(self):
        self.assertRaisesFor(401, error_envelope('No autenticado'), ApiPermissionError)
        self.assertRaisesFor(403, error_envelope('Acceso denegado'), ApiPermissionError)
        self.assertRaisesFor(404, error_envelope('No encontrado'), NotFoundError)
        self.assertRaisesFor(503, None, ServerError)
        self.assertRaisesFor(418, {'detail': 'teapot'}, ApiError)

    def test_field_dict_items(self):
        self.assertEqual(error_items({'calle': ['Requerido'], 'altura': 'Inválida'}),
                         ['calle: Requerido', 'altura: Inválida'])

    def test_timeout_and_connection_errors(self):
        for exc in (Timeout, ConnectionError):
            client, _ = fake_client({('GET', '/personas/1/'): exc})
            with self.assertRaises(ApiConnectionError):
                client.get_persona(1)
