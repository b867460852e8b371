from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('person', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='EstadoLegajo',
            fields=[
                ('id', models.PositiveSmallIntegerField(primary_key=True, serialize=False)),
                ('codigo', models.CharField(choices=[('INCOMPLETO', 'Incompleto'), ('PENDIENTE', 'Pendiente de revisión'), ('REVISION', 'En revisión'), ('VALIDADO', 'Validado'), ('BLOQUEADO', 'Bloqueado')], max_length=20, unique=True)),
                ('nombre', models.CharField(max_length=60)),
            ],
            options={
                'verbose_name': 'Estado de legajo',
                'verbose_name_plural': 'Estados de legajo',
                'db_table': 'estados_legajo',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='PersonaLegajoEstado',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('actualizado_en', models.DateTimeField(auto_now=True)),
                ('actualizado_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('estado', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='personas', to='legajo.estadolegajo')),
                ('persona', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='legajo_estado', to='person.persona')),
            ],
            options={
                'verbose_name': 'Estado de legajo de persona',
                'verbose_name_plural': 'Estados de legajo de personas',
                'db_table': 'personas_legajo_estado',
            },
        ),
        migrations.CreateModel(
            name='LegajoHistorial',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('motivo', models.CharField(blank=True, max_length=255, null=True)),
                ('cambiado_en', models.DateTimeField(auto_now_add=True)),
                ('cambiado_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('estado', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='+', to='legajo.estadolegajo')),
                ('persona', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='legajo_historial', to='person.persona')),
            ],
            options={
                'verbose_name': 'Historial de legajo',
                'verbose_name_plural': 'Historial de legajos',
                'db_table': 'personas_legajo_historial',
                'ordering': ['-cambiado_en', '-id'],
            },
        ),
        migrations.CreateModel(
            name='PlazoGracia',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('fecha_limite', models.DateField()),
                ('motivo', models.CharField(blank=True, max_length=300, null=True)),
                ('activo', models.BooleanField(default=True)),
                ('creado_en', models.DateTimeField(auto_now_add=True)),
                ('creado_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('persona', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='plazos_gracia', to='person.persona')),
            ],
            options={
                'verbose_name': 'Plazo de gracia',
                'verbose_name_plural': 'Plazos de gracia',
                'db_table': 'personas_legajo_plazo',
                'ordering': ['-creado_en', '-id'],
            },
        ),
    ]
