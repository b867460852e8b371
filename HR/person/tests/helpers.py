"""
Shared fixtures for the person and legajo API tests.
"""
from datetime import date

from django.test import TestCase
from rest_framework.test import APIClient

from core.base.test_utils import setup_core_data, create_user_with_role
from HR.person.models import (
    Archivo,
    DomBarrio,
    DomDepartamento,
    DomLocalidad,
    Persona,
    PersonaDocumento,
    TipoDocumento,
)


def make_persona(**overrides):
    data = {
        'nombre': 'Ana',
        'apellido': 'García',
        'fecha_nacimiento': date(1990, 5, 17),
        'sexo': 'F',
        'telefono': '+5493511234567',
    }
    data.update(overrides)
    return Persona.objects.create(**data)


def make_archivo(persona, subido_por=None, nombre='dni.pdf'):
    return Archivo.objects.create(
        persona=persona,
        archivo=f'personas/{persona.pk}/{nombre}',
        nombre_original=nombre,
        content_type='application/pdf',
        size_bytes=1024,
        subido_por=subido_por,
    )


def make_documento(persona, codigo='DNI', archivo=None, **extra):
    return PersonaDocumento.objects.create(
        persona=persona,
        tipo_doc=TipoDocumento.objects.get(codigo=codigo),
        archivo=archivo,
        **extra
    )


class LegajoAPITestCase(TestCase):
    """
    Users:
    - empleado: owns self.persona
    - otro_empleado: owns self.otra_persona
    - administrativo: privileged, not a reviewer
    - rrhh: reviewer
    """

    @classmethod
    def setUpTestData(cls):
        setup_core_data()

        cls.persona = make_persona()
        cls.otra_persona = make_persona(nombre='Bruno', apellido='Pérez', sexo='M')

        cls.empleado = create_user_with_role('empleado@test.com', 'empleado', persona=cls.persona)
        cls.otro_empleado = create_user_with_role('otro@test.com', 'empleado', persona=cls.otra_persona)
        cls.administrativo = create_user_with_role('administrativo@test.com', 'administrativo')
        cls.rrhh = create_user_with_role('rrhh@test.com', 'rrhh')

        cls.departamento = DomDepartamento.objects.create(departamento='Capital')
        cls.localidad = DomLocalidad.objects.create(
            departamento=cls.departamento, localidad='Centro', codigo_postal='5000'
        )
        cls.barrio = DomBarrio.objects.create(localidad=cls.localidad, barrio='Alberdi')

    def setUp(self):
        self.client = APIClient()

    def login(self, user):
        self.client.force_authenticate(user=user)

    @staticmethod
    def data(response):
        return response.json()['data']

    @staticmethod
    def results(response):
        """List payload, paginated or not."""
        payload = response.json()['data']
        if isinstance(payload, dict) and 'results' in payload:
            return payload['results']
        return payload
