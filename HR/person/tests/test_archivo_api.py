"""
API tests for file upload and signed previews.
"""
import hashlib
import shutil
import tempfile

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from rest_framework import status

from core.notifications.models import Notificacion
from HR.person.models import Archivo
from HR.person.services import ArchivoService
from .helpers import LegajoAPITestCase, make_archivo

CONTENIDO = b'%PDF-1.4 legajo de prueba'


class ArchivoAPITest(LegajoAPITestCase):

    def setUp(self):
        super().setUp()
        self.media_root = tempfile.mkdtemp()
        self.media_override = override_settings(MEDIA_ROOT=self.media_root)
        self.media_override.enable()

    def tearDown(self):
        self.media_override.disable()
        shutil.rmtree(self.media_root, ignore_errors=True)
        super().tearDown()

    def upload(self, persona, contenido=CONTENIDO, nombre='dni.pdf'):
        archivo = SimpleUploadedFile(nombre, contenido, content_type='application/pdf')
        return self.client.post(
            f'/archivos/persona/{persona.pk}/', {'archivo': archivo}, format='multipart'
        )

    def test_upload_stores_file_and_notifies(self):
        self.login(self.empleado)
        response = self.upload(self.persona)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        data = self.data(response)
        self.assertEqual(data['nombre_original'], 'dni.pdf')
        self.assertEqual(data['size_bytes'], len(CONTENIDO))
        self.assertEqual(data['sha256_hex'], hashlib.sha256(CONTENIDO).hexdigest())
        self.assertEqual(data['subido_por'], self.empleado.pk)

        archivo = Archivo.objects.get(pk=data['id'])
        self.assertTrue(archivo.archivo.name.startswith(f'personas/{self.persona.pk}/'))

        self.assertTrue(Notificacion.objects.filter(usuario=self.rrhh, tipo='DOC_SUBIDO').exists())
        self.assertTrue(Notificacion.objects.filter(usuario=self.empleado, tipo='ARCHIVO_RECIBIDO').exists())

    def test_upload_requires_file(self):
        self.login(self.empleado)
        response = self.client.post(f'/archivos/persona/{self.persona.pk}/', {}, format='multipart')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    @override_settings(ARCHIVO_MAX_BYTES=10)
    def test_upload_too_large(self):
        self.login(self.empleado)
        response = self.upload(self.persona)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Archivo.objects.exists())

    def test_upload_for_other_persona_forbidden(self):
        self.login(self.empleado)
        response = self.upload(self.otra_persona)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_signed_url_and_download(self):
        self.login(self.empleado)
        archivo_id = self.data(self.upload(self.persona))['id']

        response = self.client.get(f'/archivos/{archivo_id}/signed-url/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = self.data(response)
        self.assertEqual(data['expires_in'], 300)
        self.assertIn('/archivos/descargar/', data['url'])

        self.client.logout()
        response = self.client.get(data['url'])
        self.assertEqual(response.status_code, 200)
        self.assertEqual(b''.join(response.streaming_content), CONTENIDO)
        response.close()

    def test_signed_url_forbidden_for_other_empleado(self):
        archivo = make_archivo(self.persona, subido_por=self.empleado)
        self.login(self.otro_empleado)
        response = self.client.get(f'/archivos/{archivo.pk}/signed-url/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_forged_token_rejected(self):
        response = self.client.get('/archivos/descargar/no-es-un-token/')
        self.assertEqual(response.status_code, 403)

    @override_settings(ARCHIVO_SIGNED_URL_TTL=-1)
    def test_expired_token_rejected(self):
        archivo = make_archivo(self.persona, subido_por=self.empleado)
        token = ArchivoService.make_token(archivo)
        response = self.client.get(f'/archivos/descargar/{token}/')
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.content.decode(), 'El enlace expiró')
