"""
API tests for domicilios, barrios and the address catalogues.
"""
from rest_framework import status

from core.notifications.models import Notificacion
from HR.person.models import DomBarrio, Domicilio, PersonaBarrio
from .helpers import LegajoAPITestCase


class BarrioTest(LegajoAPITestCase):

    def test_catalogues(self):
        self.login(self.empleado)
        response = self.client.get('/dom-otros/departamentos/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('Capital', [d['departamento'] for d in self.results(response)])

        response = self.client.get(f'/dom-otros/localidades/?depto={self.departamento.pk}')
        self.assertEqual([l['localidad'] for l in self.results(response)], ['Centro'])

    def test_create_barrio_on_demand(self):
        self.login(self.empleado)
        url = f'/dom-otros/localidades/{self.localidad.pk}/barrios/'
        response = self.client.post(url, {'barrio': '  Güemes ', 'manzana': 'B', 'casa': '12'})
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = self.data(response)
        self.assertEqual(data['barrio'], 'Güemes')
        self.assertEqual(data['id_dom_localidad'], self.localidad.pk)

        response = self.client.get(url)
        self.assertEqual(len(self.results(response)), 2)

    def test_barrio_detail_too_long(self):
        self.login(self.empleado)
        response = self.client.post(
            f'/dom-otros/localidades/{self.localidad.pk}/barrios/',
            {'barrio': 'Güemes', 'piso': 'x' * 21}
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(DomBarrio.objects.count(), 1)

    def test_assign_barrio_is_idempotent(self):
        self.login(self.empleado)
        url = f'/personas/{self.persona.pk}/barrios/'
        for _ in range(2):
            response = self.client.post(url, {'id_dom_barrio': self.barrio.pk})
            self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(PersonaBarrio.objects.filter(persona=self.persona).count(), 1)

        response = self.client.get(url)
        self.assertEqual(self.results(response)[0]['barrio']['barrio'], 'Alberdi')

    def test_unassign_barrio(self):
        PersonaBarrio.objects.create(persona=self.persona, barrio=self.barrio)
        self.login(self.empleado)
        url = f'/personas/{self.persona.pk}/barrios/{self.barrio.pk}/'
        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class DomicilioCreateTest(LegajoAPITestCase):

    def setUp(self):
        super().setUp()
        self.login(self.empleado)
        self.url = f'/personas/{self.persona.pk}/domicilios/'

    def test_create_domicilio(self):
        response = self.client.post(self.url, {
            'calle': ' San Martín ', 'altura': 1234, 'id_dom_barrio': self.barrio.pk
        })
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = self.data(response)
        self.assertEqual(data['calle'], 'San Martín')
        self.assertEqual(data['barrio'], 'Alberdi')
        self.assertEqual(data['localidad'], 'Centro')
        self.assertEqual(data['departamento'], 'Capital')

    def test_altura_must_be_positive_integer(self):
        for altura in (0, -5, '12a', ''):
            response = self.client.post(self.url, {
                'calle': 'San Martín', 'altura': altura, 'id_dom_barrio': self.barrio.pk
            })
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, altura)
        self.assertFalse(Domicilio.objects.exists())

    def test_barrio_required(self):
        response = self.client.post(self.url, {'calle': 'San Martín', 'altura': 10})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('id_dom_barrio: Debés seleccionar o crear un barrio', response.json()['details'])

    def test_unknown_barrio(self):
        response = self.client.post(self.url, {'calle': 'San Martín', 'altura': 10, 'id_dom_barrio': 999999})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_calle_too_long(self):
        response = self.client.post(self.url, {
            'calle': 'x' * 121, 'altura': 10, 'id_dom_barrio': self.barrio.pk
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class DomicilioDeleteTest(LegajoAPITestCase):

    def setUp(self):
        super().setUp()
        self.domicilio = Domicilio.objects.create(
            persona=self.persona, barrio=self.barrio, calle='Colón', altura=500
        )
        self.url = f'/personas/{self.persona.pk}/domicilios/{self.domicilio.pk}/'

    def test_owner_deletes(self):
        self.login(self.empleado)
        response = self.client.delete(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.data(response)['calle'], 'Colón')
        self.assertFalse(Domicilio.objects.filter(pk=self.domicilio.pk).exists())

        self.assertTrue(Notificacion.objects.filter(usuario=self.empleado, tipo='DOMICILIO_ELIMINADO').exists())
        self.assertTrue(Notificacion.objects.filter(usuario=self.rrhh, tipo='DOMICILIO_ELIMINADO').exists())

    def test_rrhh_deletes(self):
        self.login(self.rrhh)
        response = self.client.delete(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_administrativo_denied(self):
        self.login(self.administrativo)
        response = self.client.delete(self.url)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json()['message'], 'Acceso denegado')
        self.assertTrue(Domicilio.objects.filter(pk=self.domicilio.pk).exists())

    def test_other_empleado_denied(self):
        self.login(self.otro_empleado)
        response = self.client.delete(self.url)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_persona_mismatch(self):
        self.login(self.rrhh)
        response = self.client.delete(f'/personas/{self.otra_persona.pk}/domicilios/{self.domicilio.pk}/')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_request_deletion(self):
        self.login(self.administrativo)
        response = self.client.post(
            f'/domicilios/{self.domicilio.pk}/solicitar-eliminacion/', {'motivo': 'mudanza'}
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(self.data(response)['tipo'], 'domicilio')
        self.assertTrue(Notificacion.objects.filter(usuario=self.rrhh, tipo='DOMI_DELETE_SOLICITUD').exists())
