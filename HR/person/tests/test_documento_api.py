"""
API tests for persona documents: creation, verification state changes,
deletion and deletion requests.
"""
from rest_framework import status

from core.notifications.models import Notificacion
from HR.person.models import Archivo, EliminacionSolicitud, PersonaDocumento, VerificacionDocumento
from .helpers import LegajoAPITestCase, make_archivo, make_documento


class DocumentoCreateTest(LegajoAPITestCase):

    def url(self, persona):
        return f'/personas/{persona.pk}/documentos/'

    def test_empleado_creates_pending_even_when_asking_for_approved(self):
        self.login(self.empleado)
        archivo = make_archivo(self.persona, subido_por=self.empleado)
        response = self.client.post(self.url(self.persona), {
            'id_tipo_doc': 'DNI',
            'id_archivo': archivo.pk,
            'id_estado_verificacion': 'APROBADO',
        })
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = self.data(response)
        self.assertEqual(data['estado_codigo'], 'PENDIENTE')
        self.assertEqual(data['tipo_codigo'], 'DNI')
        self.assertEqual(data['subido_por'], self.empleado.pk)
        self.assertFalse(VerificacionDocumento.objects.exists())

    def test_rrhh_creates_rejected_without_observacion(self):
        self.login(self.rrhh)
        response = self.client.post(self.url(self.persona), {
            'id_tipo_doc': 1,
            'id_estado_verificacion': 3,
            'observacion': '   ',
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('observación', response.json()['message'])
        self.assertFalse(PersonaDocumento.objects.exists())

    def test_rrhh_creates_approved_with_history(self):
        self.login(self.rrhh)
        response = self.client.post(self.url(self.persona), {
            'id_tipo_doc': 'CUIL',
            'id_estado_verificacion': 'APROBADO',
        })
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = self.data(response)
        self.assertEqual(data['estado_codigo'], 'APROBADO')
        self.assertEqual(data['verificado_por'], self.rrhh.pk)
        self.assertEqual(VerificacionDocumento.objects.filter(documento_id=data['id']).count(), 1)

    def test_new_vigente_document_retires_previous(self):
        anterior = make_documento(self.persona, 'DNI')
        self.login(self.empleado)
        response = self.client.post(self.url(self.persona), {'id_tipo_doc': 'DNI'})
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        nuevo_id = self.data(response)['id']

        anterior.refresh_from_db()
        self.assertFalse(anterior.vigente)

        response = self.client.get(self.url(self.persona) + '?vigentes=1')
        self.assertEqual([d['id'] for d in self.results(response)], [nuevo_id])

        response = self.client.get(self.url(self.persona))
        self.assertEqual(len(self.results(response)), 2)

    def test_unknown_tipo_rejected(self):
        self.login(self.empleado)
        response = self.client.post(self.url(self.persona), {'id_tipo_doc': 'PASAPORTE'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_archivo_of_other_persona_rejected(self):
        archivo = make_archivo(self.otra_persona, subido_por=self.otro_empleado)
        self.login(self.empleado)
        response = self.client.post(self.url(self.persona), {'id_tipo_doc': 'DNI', 'id_archivo': archivo.pk})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_empleado_cannot_create_for_other_persona(self):
        self.login(self.empleado)
        response = self.client.post(self.url(self.otra_persona), {'id_tipo_doc': 'DNI'})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_tipos_flag_obligatorios(self):
        self.login(self.empleado)
        response = self.client.get('/documentos/tipos/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        obligatorios = {t['codigo'] for t in self.results(response) if t['obligatorio']}
        self.assertEqual(obligatorios, {'DNI', 'CUIL', 'DOM'})


class DocumentoEstadoTest(LegajoAPITestCase):

    def setUp(self):
        super().setUp()
        self.documento = make_documento(self.persona, 'DNI')
        self.url = f'/documentos/{self.documento.pk}/estado/'

    def test_rejected_requires_observacion(self):
        self.login(self.rrhh)
        response = self.client.patch(self.url, {'id_estado_verificacion': 'RECHAZADO', 'observacion': ''})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.documento.refresh_from_db()
        self.assertEqual(self.documento.estado_verificacion.codigo, 'PENDIENTE')

    def test_observed_with_observacion_notifies(self):
        self.login(self.rrhh)
        response = self.client.patch(self.url, {
            'id_estado_verificacion': 'OBSERVADO',
            'observacion': ' Foto ilegible ',
        })
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = self.data(response)
        self.assertEqual(data['estado_codigo'], 'OBSERVADO')
        self.assertEqual(data['observacion'], 'Foto ilegible')

        owner = Notificacion.objects.get(usuario=self.empleado, tipo='DOC_ESTADO')
        self.assertEqual(owner.nivel, 'warning')
        self.assertEqual(owner.observacion, 'Foto ilegible')
        self.assertEqual(owner.link, '/dashboard/legajo')

        reviewer = Notificacion.objects.get(usuario=self.rrhh, tipo='DOC_VERIFICADO')
        self.assertEqual(reviewer.link, f'/dashboard/legajo?persona={self.persona.pk}')
        self.assertEqual(reviewer.meta['verificado_por'], self.rrhh.pk)

    def test_any_transition_allowed(self):
        self.login(self.rrhh)
        for estado in ('APROBADO', 'PENDIENTE', 'RECHAZADO', 'APROBADO'):
            response = self.client.patch(self.url, {'id_estado_verificacion': estado, 'observacion': 'ok'})
            self.assertEqual(response.status_code, status.HTTP_200_OK, estado)
        self.assertEqual(self.documento.verificaciones.count(), 4)

    def test_invalid_estado(self):
        self.login(self.rrhh)
        response = self.client.patch(self.url, {'id_estado_verificacion': 99})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_empleado_cannot_change_state(self):
        self.login(self.empleado)
        response = self.client.patch(self.url, {'id_estado_verificacion': 'APROBADO'})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class DocumentoDeleteTest(LegajoAPITestCase):

    def url(self, persona, documento):
        return f'/personas/{persona.pk}/documentos/{documento.pk}/'

    def test_uploader_deletes_and_orphan_file_removed(self):
        archivo = make_archivo(self.persona, subido_por=self.empleado)
        documento = make_documento(self.persona, 'DNI', archivo=archivo)

        self.login(self.empleado)
        response = self.client.delete(self.url(self.persona, documento))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.data(response)['tipo_codigo'], 'DNI')
        self.assertFalse(PersonaDocumento.objects.filter(pk=documento.pk).exists())
        self.assertFalse(Archivo.objects.filter(pk=archivo.pk).exists())
        self.assertTrue(Notificacion.objects.filter(usuario=self.rrhh, tipo='DOC_ELIMINADO').exists())

    def test_shared_file_survives_deletion(self):
        archivo = make_archivo(self.persona, subido_por=self.empleado)
        documento = make_documento(self.persona, 'DNI', archivo=archivo)
        make_documento(self.persona, 'CUIL', archivo=archivo)

        self.login(self.rrhh)
        response = self.client.delete(self.url(self.persona, documento))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(Archivo.objects.filter(pk=archivo.pk).exists())

    def test_owner_who_did_not_upload_gets_403(self):
        archivo = make_archivo(self.persona, subido_por=self.rrhh)
        documento = make_documento(self.persona, 'DNI', archivo=archivo)

        self.login(self.empleado)
        response = self.client.delete(self.url(self.persona, documento))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(PersonaDocumento.objects.filter(pk=documento.pk).exists())

    def test_document_of_other_persona(self):
        documento = make_documento(self.otra_persona, 'DNI')
        self.login(self.rrhh)
        response = self.client.delete(self.url(self.persona, documento))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_missing_document(self):
        self.login(self.rrhh)
        response = self.client.delete(f'/personas/{self.persona.pk}/documentos/999999/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class DocumentoSolicitarEliminacionTest(LegajoAPITestCase):

    def setUp(self):
        super().setUp()
        self.documento = make_documento(self.persona, 'DNI')
        self.url = f'/documentos/{self.documento.pk}/solicitar-eliminacion/'

    def test_owner_requests_deletion(self):
        self.login(self.empleado)
        response = self.client.post(self.url, {'motivo': '  Cargué el equivocado  '})
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        solicitud = EliminacionSolicitud.objects.get()
        self.assertEqual(solicitud.motivo, 'Cargué el equivocado')
        self.assertEqual(solicitud.estado, 'PENDIENTE')
        self.assertTrue(PersonaDocumento.objects.filter(pk=self.documento.pk).exists())

        self.assertTrue(Notificacion.objects.filter(usuario=self.rrhh, tipo='DOC_DELETE_SOLICITUD').exists())
        self.assertTrue(Notificacion.objects.filter(usuario=self.empleado, tipo='DOC_DELETE_SOLICITUD').exists())

    def test_blank_motivo_stored_as_null(self):
        self.login(self.empleado)
        response = self.client.post(self.url, {'motivo': '   '})
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIsNone(EliminacionSolicitud.objects.get().motivo)

    def test_motivo_too_long(self):
        self.login(self.empleado)
        response = self.client.post(self.url, {'motivo': 'x' * 301})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_other_empleado_forbidden(self):
        self.login(self.otro_empleado)
        response = self.client.post(self.url, {})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_missing_target(self):
        self.login(self.empleado)
        response = self.client.post('/documentos/999999/solicitar-eliminacion/', {})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_reviewers_list_requests(self):
        self.login(self.empleado)
        self.client.post(self.url, {'motivo': 'duplicado'})

        self.login(self.rrhh)
        response = self.client.get('/eliminaciones/?estado=pendiente')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(self.results(response)), 1)

        self.login(self.empleado)
        response = self.client.get('/eliminaciones/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
