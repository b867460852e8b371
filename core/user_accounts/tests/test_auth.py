"""
Tests for login, token refresh and the current user endpoint.
"""
from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied
from rest_framework import status
from rest_framework.test import APIClient, APITestCase

from core.base.test_utils import setup_core_data, create_user_with_role
from HR.person.models import Persona

User = get_user_model()


class LoginAPITest(APITestCase):

    @classmethod
    def setUpTestData(cls):
        setup_core_data()
        cls.user = create_user_with_role('empleado@test.com', 'empleado', password='TestPass123')

    def setUp(self):
        self.client = APIClient()
        self.url = '/auth/login/'

    def test_login_success(self):
        response = self.client.post(self.url, {'email': 'empleado@test.com', 'password': 'TestPass123'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.json()['data']
        self.assertIn('access', data['tokens'])
        self.assertIn('refresh', data['tokens'])
        self.assertEqual(data['user']['roles'], ['EMPLEADO'])

    def test_login_wrong_password(self):
        response = self.client.post(self.url, {'email': 'empleado@test.com', 'password': 'nope'})
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['message'], 'Credenciales inválidas')

    def test_login_missing_fields(self):
        response = self.client.post(self.url, {'email': 'empleado@test.com'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_token_grants_access_and_refreshes(self):
        tokens = self.client.post(
            self.url, {'email': 'empleado@test.com', 'password': 'TestPass123'}
        ).json()['data']['tokens']

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")
        response = self.client.get('/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        self.client.credentials()
        response = self.client.post('/auth/token/refresh/', {'refresh': tokens['refresh']})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.json()['data'])


class MeAPITest(APITestCase):

    @classmethod
    def setUpTestData(cls):
        setup_core_data()
        cls.persona = Persona.objects.create(nombre='Ana', apellido='García')
        cls.empleado = create_user_with_role('empleado@test.com', 'empleado', persona=cls.persona)
        cls.rrhh = create_user_with_role('rrhh@test.com', 'rrhh')

    def setUp(self):
        self.client = APIClient()

    def test_me_includes_persona_and_permissions(self):
        self.client.force_authenticate(user=self.empleado)
        response = self.client.get('/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.json()['data']
        self.assertEqual(data['id_persona'], self.persona.pk)
        pages = {p['page'] for p in data['permissions']}
        self.assertIn('hr_documentos', pages)
        self.assertNotIn('hr_verificacion', pages)

    def test_me_without_persona(self):
        self.client.force_authenticate(user=self.rrhh)
        data = self.client.get('/auth/me/').json()['data']
        self.assertIsNone(data['id_persona'])
        self.assertEqual(data['roles'], ['RRHH'])

    def test_me_requires_authentication(self):
        response = self.client.get('/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class UserModelTest(APITestCase):

    def test_email_is_normalized(self):
        user = User.objects.create_user(email='Ana@EXAMPLE.com', name='Ana', password='x')
        self.assertEqual(user.email, 'Ana@example.com')
        self.assertFalse(user.is_admin())

    def test_super_admin_cannot_be_deleted(self):
        user = User.objects.create_superuser(email='root@example.com', name='Root', password='x')
        self.assertTrue(user.is_admin())
        with self.assertRaises(PermissionDenied):
            user.delete()
