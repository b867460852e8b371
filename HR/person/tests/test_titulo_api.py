"""
API tests for títulos.
"""
from datetime import date

from rest_framework import status

from core.notifications.models import Notificacion
from HR.person.models import Archivo, EstadoVerificacion, Titulo, TipoTitulo
from .helpers import LegajoAPITestCase, make_archivo


class TituloCreateTest(LegajoAPITestCase):

    def payload(self, **extra):
        data = {
            'id_persona': self.persona.pk,
            'id_tipo_titulo': TipoTitulo.objects.get(codigo='GRADO').pk,
            'nombre_titulo': 'Licenciada en Psicología',
            'institucion': 'UNC',
            'fecha_emision': '2015-12-10',
        }
        data.update(extra)
        return data

    def test_create_titulo(self):
        self.login(self.empleado)
        response = self.client.post('/titulos/', self.payload())
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = self.data(response)
        self.assertEqual(data['estado_codigo'], 'PENDIENTE')
        self.assertEqual(data['tipo_titulo_nombre'], 'Grado')

    def test_required_fields(self):
        self.login(self.empleado)
        response = self.client.post('/titulos/', {'id_persona': self.persona.pk, 'nombre_titulo': ' '})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        fields = {d.split(':')[0] for d in response.json()['details']}
        self.assertEqual(fields, {'id_tipo_titulo', 'nombre_titulo'})

    def test_matricula_too_long(self):
        self.login(self.empleado)
        response = self.client.post('/titulos/', self.payload(matricula_prof='M' * 51))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_resubmission_updates_and_resets_verification(self):
        titulo = Titulo.objects.create(
            persona=self.persona,
            tipo_titulo=TipoTitulo.objects.get(codigo='GRADO'),
            nombre_titulo='Licenciada en Psicología',
            institucion='UNC',
            fecha_emision=date(2015, 12, 10),
            estado_verificacion=EstadoVerificacion.objects.get(codigo='APROBADO'),
            verificado_por=self.rrhh,
        )
        self.login(self.empleado)
        response = self.client.post('/titulos/', self.payload(matricula_prof='MP-1234'))
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(self.data(response)['id'], titulo.pk)

        titulo.refresh_from_db()
        self.assertEqual(titulo.matricula_prof, 'MP-1234')
        self.assertEqual(titulo.estado_verificacion.codigo, 'PENDIENTE')
        self.assertIsNone(titulo.verificado_por)
        self.assertEqual(Titulo.objects.filter(persona=self.persona).count(), 1)

    def test_resubmission_clears_previous_observacion(self):
        titulo = Titulo.objects.create(
            persona=self.persona,
            tipo_titulo=TipoTitulo.objects.get(codigo='GRADO'),
            nombre_titulo='Licenciada en Psicología',
            institucion='UNC',
            fecha_emision=date(2015, 12, 10),
        )
        self.login(self.rrhh)
        response = self.client.patch(f'/titulos/{titulo.pk}/estado/',
                                     {'id_estado_verificacion': 'OBSERVADO', 'observacion': 'Falta legalizar'})
        self.assertEqual(self.data(response)['observacion'], 'Falta legalizar')

        self.login(self.empleado)
        response = self.client.post('/titulos/', self.payload())
        data = self.data(response)
        self.assertEqual(data['estado_codigo'], 'PENDIENTE')
        self.assertEqual(data['observacion'], '')
        self.assertEqual(
            [v.estado_verificacion.codigo for v in titulo.verificaciones.all()], ['PENDIENTE', 'OBSERVADO']
        )

    def test_resubmission_with_new_file_cleans_orphan(self):
        viejo = make_archivo(self.persona, subido_por=self.empleado, nombre='viejo.pdf')
        nuevo = make_archivo(self.persona, subido_por=self.empleado, nombre='nuevo.pdf')
        self.login(self.empleado)
        self.client.post('/titulos/', self.payload(id_archivo=viejo.pk))
        response = self.client.post('/titulos/', self.payload(id_archivo=nuevo.pk))
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(self.data(response)['id_archivo'], nuevo.pk)
        self.assertFalse(Archivo.objects.filter(pk=viejo.pk).exists())

    def test_privileged_initial_estado(self):
        self.login(self.administrativo)
        response = self.client.post('/titulos/', self.payload(id_estado_verificacion='OBSERVADO'))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.post('/titulos/', self.payload(
            id_estado_verificacion='OBSERVADO', observacion='Falta legalizar'
        ))
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = self.data(response)
        self.assertEqual(data['estado_codigo'], 'OBSERVADO')
        self.assertEqual(data['observacion'], 'Falta legalizar')

    def test_empleado_cannot_create_for_other_persona(self):
        self.login(self.empleado)
        response = self.client.post('/titulos/', self.payload(id_persona=self.otra_persona.pk))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class TituloListTest(LegajoAPITestCase):

    def test_persona_param_required(self):
        self.login(self.rrhh)
        response = self.client.get('/titulos/')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_owner_lists(self):
        Titulo.objects.create(
            persona=self.persona,
            tipo_titulo=TipoTitulo.objects.get(codigo='SECUNDARIO'),
            nombre_titulo='Bachiller',
        )
        self.login(self.empleado)
        response = self.client.get(f'/titulos/?persona={self.persona.pk}')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([t['nombre_titulo'] for t in self.results(response)], ['Bachiller'])

        response = self.client.get(f'/titulos/?persona={self.otra_persona.pk}')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_tipos(self):
        self.login(self.empleado)
        response = self.client.get('/titulos/tipos/')
        self.assertEqual(len(self.results(response)), 6)


class TituloEstadoDeleteTest(LegajoAPITestCase):

    def setUp(self):
        super().setUp()
        self.archivo = make_archivo(self.persona, subido_por=self.empleado, nombre='titulo.pdf')
        self.titulo = Titulo.objects.create(
            persona=self.persona,
            tipo_titulo=TipoTitulo.objects.get(codigo='GRADO'),
            nombre_titulo='Abogada',
            archivo=self.archivo,
        )

    def test_approve_notifies_success(self):
        self.login(self.rrhh)
        response = self.client.patch(f'/titulos/{self.titulo.pk}/estado/', {'id_estado_verificacion': 2})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        notificacion = Notificacion.objects.get(usuario=self.empleado, tipo='TITULO_ESTADO')
        self.assertEqual(notificacion.nivel, 'success')
        self.assertTrue(Notificacion.objects.filter(usuario=self.rrhh, tipo='TITULO_VERIFICADO').exists())

    def test_reject_requires_observacion(self):
        self.login(self.rrhh)
        response = self.client.patch(f'/titulos/{self.titulo.pk}/estado/', {'id_estado_verificacion': 'RECHAZADO'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_uploader_deletes(self):
        self.login(self.empleado)
        response = self.client.delete(f'/personas/{self.persona.pk}/titulos/{self.titulo.pk}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Titulo.objects.filter(pk=self.titulo.pk).exists())
        self.assertFalse(Archivo.objects.filter(pk=self.archivo.pk).exists())
        self.assertTrue(Notificacion.objects.filter(usuario=self.rrhh, tipo='TITULO_ELIMINADO').exists())

    def test_other_empleado_cannot_delete(self):
        self.login(self.otro_empleado)
        response = self.client.delete(f'/personas/{self.persona.pk}/titulos/{self.titulo.pk}/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_request_deletion(self):
        self.login(self.empleado)
        response = self.client.post(f'/titulos/{self.titulo.pk}/solicitar-eliminacion/', {})
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(Notificacion.objects.filter(usuario=self.rrhh, tipo='TITULO_DELETE_SOLICITUD').exists())
