from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import HR.person.models.archivo


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='EstadoVerificacion',
            fields=[
                ('id', models.PositiveSmallIntegerField(primary_key=True, serialize=False)),
                ('codigo', models.CharField(choices=[('PENDIENTE', 'Pendiente'), ('APROBADO', 'Aprobado'), ('RECHAZADO', 'Rechazado'), ('OBSERVADO', 'Observado')], max_length=20, unique=True)),
                ('nombre', models.CharField(max_length=60)),
            ],
            options={
                'verbose_name': 'Estado de verificación',
                'verbose_name_plural': 'Estados de verificación',
                'db_table': 'estado_verificacion',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Persona',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='person_persona_created', to=settings.AUTH_USER_MODEL)),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='person_persona_updated', to=settings.AUTH_USER_MODEL)),
                ('nombre', models.CharField(max_length=100)),
                ('apellido', models.CharField(max_length=100)),
                ('fecha_nacimiento', models.DateField(blank=True, null=True)),
                ('sexo', models.CharField(blank=True, default='', max_length=20)),
                ('telefono', models.CharField(blank=True, default='', max_length=16, validators=[django.core.validators.RegexValidator(message='El teléfono debe tener entre 7 y 15 dígitos, con + opcional', regex='^\\+?\\d{7,15}$')])),
                ('email', models.EmailField(blank=True, default='', max_length=254)),
                ('usuario', models.OneToOneField(blank=True, help_text='User account of the persona, if any', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='persona', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Persona',
                'verbose_name_plural': 'Personas',
                'db_table': 'personas',
                'ordering': ['apellido', 'nombre'],
            },
        ),
        migrations.CreateModel(
            name='PersonaIdentificacion',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='person_personaidentificacion_created', to=settings.AUTH_USER_MODEL)),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='person_personaidentificacion_updated', to=settings.AUTH_USER_MODEL)),
                ('dni', models.CharField(blank=True, default='', max_length=20)),
                ('cuil', models.CharField(blank=True, default='', max_length=20)),
                ('persona', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='identificacion', to='person.persona')),
            ],
            options={
                'verbose_name': 'Identificación',
                'verbose_name_plural': 'Identificaciones',
                'db_table': 'personas_identificacion',
            },
        ),
        migrations.CreateModel(
            name='Archivo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('archivo', models.FileField(max_length=255, upload_to=HR.person.models.archivo.archivo_upload_to)),
                ('nombre_original', models.CharField(max_length=255)),
                ('content_type', models.CharField(blank=True, default='', max_length=100)),
                ('size_bytes', models.PositiveBigIntegerField(default=0)),
                ('sha256_hex', models.CharField(blank=True, default='', max_length=64)),
                ('subido_en', models.DateTimeField(auto_now_add=True)),
                ('persona', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='archivos', to='person.persona')),
                ('subido_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='archivos_subidos', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Archivo',
                'verbose_name_plural': 'Archivos',
                'db_table': 'archivos',
                'ordering': ['-subido_en', '-id'],
            },
        ),
        migrations.CreateModel(
            name='TipoDocumento',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('codigo', models.CharField(max_length=20, unique=True)),
                ('nombre', models.CharField(max_length=100)),
            ],
            options={
                'verbose_name': 'Tipo de documento',
                'verbose_name_plural': 'Tipos de documento',
                'db_table': 'tipos_documento',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='PersonaDocumento',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='person_personadocumento_created', to=settings.AUTH_USER_MODEL)),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='person_personadocumento_updated', to=settings.AUTH_USER_MODEL)),
                ('vigente', models.BooleanField(default=True)),
                ('verificado_en', models.DateTimeField(blank=True, null=True)),
                ('archivo', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='documentos', to='person.archivo')),
                ('estado_verificacion', models.ForeignKey(default=1, on_delete=django.db.models.deletion.PROTECT, related_name='documentos', to='person.estadoverificacion')),
                ('persona', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='documentos', to='person.persona')),
                ('tipo_doc', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='documentos', to='person.tipodocumento')),
                ('verificado_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='documentos_verificados', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Documento de persona',
                'verbose_name_plural': 'Documentos de persona',
                'db_table': 'personas_documentos',
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['persona', 'tipo_doc'], name='persona_doc_tipo_idx')],
            },
        ),
        migrations.CreateModel(
            name='VerificacionDocumento',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('observacion', models.TextField(blank=True, default='')),
                ('verificado_en', models.DateTimeField(default=django.utils.timezone.now)),
                ('documento', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='verificaciones', to='person.personadocumento')),
                ('estado_verificacion', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='+', to='person.estadoverificacion')),
                ('verificado_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Verificación de documento',
                'verbose_name_plural': 'Verificaciones de documentos',
                'db_table': 'verificacion_documentos',
                'ordering': ['-verificado_en', '-id'],
            },
        ),
        migrations.CreateModel(
            name='DomDepartamento',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('departamento', models.CharField(max_length=100)),
            ],
            options={
                'verbose_name': 'Departamento',
                'verbose_name_plural': 'Departamentos',
                'db_table': 'dom_departamento',
                'ordering': ['departamento'],
            },
        ),
        migrations.CreateModel(
            name='DomLocalidad',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('localidad', models.CharField(max_length=100)),
                ('codigo_postal', models.CharField(blank=True, default='', max_length=10)),
                ('departamento', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='localidades', to='person.domdepartamento')),
            ],
            options={
                'verbose_name': 'Localidad',
                'verbose_name_plural': 'Localidades',
                'db_table': 'dom_localidad',
                'ordering': ['localidad'],
            },
        ),
        migrations.CreateModel(
            name='DomBarrio',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('barrio', models.CharField(max_length=120)),
                ('manzana', models.CharField(blank=True, default='', max_length=20)),
                ('casa', models.CharField(blank=True, default='', max_length=20)),
                ('departamento', models.CharField(blank=True, default='', max_length=20)),
                ('piso', models.CharField(blank=True, default='', max_length=20)),
                ('localidad', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='barrios', to='person.domlocalidad')),
            ],
            options={
                'verbose_name': 'Barrio',
                'verbose_name_plural': 'Barrios',
                'db_table': 'dom_barrio',
                'ordering': ['barrio'],
            },
        ),
        migrations.CreateModel(
            name='PersonaBarrio',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('asignado_en', models.DateTimeField(auto_now_add=True)),
                ('barrio', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='asignaciones', to='person.dombarrio')),
                ('persona', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='barrios_asignados', to='person.persona')),
            ],
            options={
                'verbose_name': 'Barrio de persona',
                'verbose_name_plural': 'Barrios de persona',
                'db_table': 'persona_barrio',
                'ordering': ['-asignado_en'],
                'unique_together': {('persona', 'barrio')},
            },
        ),
        migrations.CreateModel(
            name='Domicilio',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='person_domicilio_created', to=settings.AUTH_USER_MODEL)),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='person_domicilio_updated', to=settings.AUTH_USER_MODEL)),
                ('calle', models.CharField(max_length=120)),
                ('altura', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('barrio', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='domicilios', to='person.dombarrio')),
                ('persona', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='domicilios', to='person.persona')),
            ],
            options={
                'verbose_name': 'Domicilio',
                'verbose_name_plural': 'Domicilios',
                'db_table': 'persona_domicilio',
                'ordering': ['-created_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='TipoTitulo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('codigo', models.CharField(max_length=20, unique=True)),
                ('nombre', models.CharField(max_length=100)),
            ],
            options={
                'verbose_name': 'Tipo de título',
                'verbose_name_plural': 'Tipos de título',
                'db_table': 'tipos_titulo',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Titulo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='person_titulo_created', to=settings.AUTH_USER_MODEL)),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='person_titulo_updated', to=settings.AUTH_USER_MODEL)),
                ('nombre_titulo', models.CharField(max_length=255)),
                ('institucion', models.CharField(blank=True, default='', max_length=255)),
                ('fecha_emision', models.DateField(blank=True, null=True)),
                ('matricula_prof', models.CharField(blank=True, default='', max_length=50)),
                ('verificado_en', models.DateTimeField(blank=True, null=True)),
                ('archivo', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='titulos', to='person.archivo')),
                ('estado_verificacion', models.ForeignKey(default=1, on_delete=django.db.models.deletion.PROTECT, related_name='titulos', to='person.estadoverificacion')),
                ('persona', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='titulos', to='person.persona')),
                ('tipo_titulo', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='titulos', to='person.tipotitulo')),
                ('verificado_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='titulos_verificados', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Título',
                'verbose_name_plural': 'Títulos',
                'db_table': 'personas_titulos',
                'ordering': ['-created_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='VerificacionTitulo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('observacion', models.TextField(blank=True, default='')),
                ('verificado_en', models.DateTimeField(default=django.utils.timezone.now)),
                ('estado_verificacion', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='+', to='person.estadoverificacion')),
                ('titulo', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='verificaciones', to='person.titulo')),
                ('verificado_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Verificación de título',
                'verbose_name_plural': 'Verificaciones de títulos',
                'db_table': 'verificacion_titulos',
                'ordering': ['-verificado_en', '-id'],
            },
        ),
        migrations.CreateModel(
            name='EliminacionSolicitud',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tipo', models.CharField(choices=[('documento', 'Documento'), ('domicilio', 'Domicilio'), ('titulo', 'Título')], max_length=20)),
                ('objetivo_id', models.PositiveBigIntegerField(help_text='ID of the record to delete')),
                ('motivo', models.CharField(blank=True, max_length=300, null=True)),
                ('estado', models.CharField(choices=[('PENDIENTE', 'Pendiente'), ('APROBADA', 'Aprobada'), ('RECHAZADA', 'Rechazada')], default='PENDIENTE', max_length=20)),
                ('creado_en', models.DateTimeField(auto_now_add=True)),
                ('persona', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='solicitudes_eliminacion', to='person.persona')),
                ('solicitado_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='solicitudes_eliminacion', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Solicitud de eliminación',
                'verbose_name_plural': 'Solicitudes de eliminación',
                'db_table': 'eliminacion_solicitudes',
                'ordering': ['-creado_en', '-id'],
            },
        ),
    ]
