from django.db import migrations

ESTADOS_LEGAJO = [
    (1, 'INCOMPLETO', 'Incompleto'),
    (2, 'PENDIENTE', 'Pendiente de revisión'),
    (3, 'REVISION', 'En revisión'),
    (4, 'VALIDADO', 'Validado'),
    (5, 'BLOQUEADO', 'Bloqueado'),
]


def create_estados(apps, schema_editor):
    EstadoLegajo = apps.get_model('legajo', 'EstadoLegajo')
    for pk, codigo, nombre in ESTADOS_LEGAJO:
        EstadoLegajo.objects.update_or_create(pk=pk, defaults={'codigo': codigo, 'nombre': nombre})


def remove_estados(apps, schema_editor):
    apps.get_model('legajo', 'EstadoLegajo').objects.filter(
        codigo__in=[c for _, c, _ in ESTADOS_LEGAJO]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('legajo', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(create_estados, remove_estados),
    ]
