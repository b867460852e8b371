"""
API tests for personas and their identification.
"""
from rest_framework import status

from HR.person.models import Persona, PersonaIdentificacion
from .helpers import LegajoAPITestCase


class PersonaCreateValidationTest(LegajoAPITestCase):

    def setUp(self):
        super().setUp()
        self.login(self.rrhh)
        self.valid = {
            'nombre': 'Carla',
            'apellido': 'Suárez',
            'fecha_nacimiento': '1988-02-29',
            'sexo': 'F',
            'telefono': '3511234567',
        }

    def test_create_persona(self):
        response = self.client.post('/personas/', self.valid)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        body = response.json()
        self.assertEqual(body['status'], 'success')
        self.assertEqual(body['data']['nombre'], 'Carla')
        self.assertTrue(Persona.objects.filter(apellido='Suárez').exists())

    def test_blank_nombre_rejected(self):
        response = self.client.post('/personas/', {**self.valid, 'nombre': ''})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        body = response.json()
        self.assertEqual(body['status'], 'error')
        self.assertTrue(any(d.startswith('nombre:') for d in body['details']))

    def test_missing_apellido_and_sexo_rejected(self):
        data = {k: v for k, v in self.valid.items() if k not in ('apellido', 'sexo')}
        response = self.client.post('/personas/', data)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        fields = {d.split(':')[0] for d in response.json()['details']}
        self.assertEqual(fields, {'apellido', 'sexo'})

    def test_invalid_fecha_nacimiento_rejected(self):
        for value in ('', '2023-02-30', 'ayer'):
            response = self.client.post('/personas/', {**self.valid, 'fecha_nacimiento': value})
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, value)

    def test_telefono_format(self):
        for value in ('123', '+12345678901234567', '351-123456', 'abcdefghij'):
            response = self.client.post('/personas/', {**self.valid, 'telefono': value})
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, value)

        for value in ('+5493511234567', '1234567', ''):
            response = self.client.post('/personas/', {**self.valid, 'telefono': value})
            self.assertEqual(response.status_code, status.HTTP_201_CREATED, value)


class PersonaAccessTest(LegajoAPITestCase):

    def test_empleado_reads_own_persona(self):
        self.login(self.empleado)
        response = self.client.get(f'/personas/{self.persona.pk}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.data(response)['full_name'], 'García, Ana')

    def test_empleado_cannot_read_other_persona(self):
        self.login(self.empleado)
        response = self.client.get(f'/personas/{self.otra_persona.pk}/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_list_is_scoped_for_empleado(self):
        self.login(self.empleado)
        response = self.client.get('/personas/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ids = [p['id'] for p in self.results(response)]
        self.assertEqual(ids, [self.persona.pk])

    def test_list_for_rrhh_with_search(self):
        self.login(self.rrhh)
        response = self.client.get('/personas/?q=pér')
        ids = [p['id'] for p in self.results(response)]
        self.assertEqual(ids, [self.otra_persona.pk])

    def test_empleado_with_persona_cannot_create_another(self):
        self.login(self.empleado)
        response = self.client.post('/personas/', {
            'nombre': 'X', 'apellido': 'Y', 'fecha_nacimiento': '2000-01-01', 'sexo': 'M'
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_patch_persona(self):
        self.login(self.empleado)
        response = self.client.patch(f'/personas/{self.persona.pk}/', {'telefono': '+541112345678'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.persona.refresh_from_db()
        self.assertEqual(self.persona.telefono, '+541112345678')

    def test_patch_rejects_bad_telefono(self):
        self.login(self.empleado)
        response = self.client.patch(f'/personas/{self.persona.pk}/', {'telefono': '12'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unauthenticated_request_rejected(self):
        response = self.client.get(f'/personas/{self.persona.pk}/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class IdentificacionAPITest(LegajoAPITestCase):

    def test_get_without_identificacion_returns_null(self):
        self.login(self.empleado)
        response = self.client.get(f'/personas/{self.persona.pk}/identificacion/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNone(self.data(response))

    def test_set_and_update_identificacion(self):
        self.login(self.empleado)
        url = f'/personas/{self.persona.pk}/identificacion/'
        response = self.client.post(url, {'dni': '30123456'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        response = self.client.post(url, {'cuil': '27301234561'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        identificacion = PersonaIdentificacion.objects.get(persona=self.persona)
        self.assertEqual(identificacion.dni, '30123456')
        self.assertEqual(identificacion.cuil, '27301234561')
        self.assertTrue(identificacion.completa)

    def test_invalid_dni_rejected(self):
        self.login(self.empleado)
        response = self.client.post(f'/personas/{self.persona.pk}/identificacion/', {'dni': '12ab'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
