from django.db import migrations

ESTADOS_VERIFICACION = [
    (1, 'PENDIENTE', 'Pendiente'),
    (2, 'APROBADO', 'Aprobado'),
    (3, 'RECHAZADO', 'Rechazado'),
    (4, 'OBSERVADO', 'Observado'),
]

TIPOS_DOCUMENTO = [
    (1, 'DNI', 'DNI'),
    (2, 'CUIL', 'Constancia de CUIL'),
    (3, 'DOM', 'Constancia de domicilio'),
    (4, 'TIT', 'Título habilitante'),
    (5, 'CV', 'Currículum vitae'),
    (6, 'FOJA', 'Foja de servicios'),
]

TIPOS_TITULO = [
    (1, 'SECUNDARIO', 'Secundario'),
    (2, 'TERCIARIO', 'Terciario'),
    (3, 'GRADO', 'Grado'),
    (4, 'POSGRADO', 'Posgrado'),
    (5, 'MAESTRIA', 'Maestría'),
    (6, 'DOCTORADO', 'Doctorado'),
]


def create_catalogos(apps, schema_editor):
    EstadoVerificacion = apps.get_model('person', 'EstadoVerificacion')
    TipoDocumento = apps.get_model('person', 'TipoDocumento')
    TipoTitulo = apps.get_model('person', 'TipoTitulo')

    # update_or_create keeps the migration idempotent
    for pk, codigo, nombre in ESTADOS_VERIFICACION:
        EstadoVerificacion.objects.update_or_create(pk=pk, defaults={'codigo': codigo, 'nombre': nombre})
    for pk, codigo, nombre in TIPOS_DOCUMENTO:
        TipoDocumento.objects.update_or_create(pk=pk, defaults={'codigo': codigo, 'nombre': nombre})
    for pk, codigo, nombre in TIPOS_TITULO:
        TipoTitulo.objects.update_or_create(pk=pk, defaults={'codigo': codigo, 'nombre': nombre})


def remove_catalogos(apps, schema_editor):
    apps.get_model('person', 'TipoTitulo').objects.filter(
        codigo__in=[c for _, c, _ in TIPOS_TITULO]).delete()
    apps.get_model('person', 'TipoDocumento').objects.filter(
        codigo__in=[c for _, c, _ in TIPOS_DOCUMENTO]).delete()
    apps.get_model('person', 'EstadoVerificacion').objects.filter(
        codigo__in=[c for _, c, _ in ESTADOS_VERIFICACION]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('person', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(create_catalogos, remove_catalogos),
    ]
