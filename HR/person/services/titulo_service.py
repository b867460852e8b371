import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from HR.person.dtos import TituloCreateDTO, CambioEstadoDTO
from HR.person.models import (
    EstadoVerificacion,
    Persona,
    TipoTitulo,
    Titulo,
    VerificacionTitulo,
    nivel_notificacion,
)
from HR.person.signals import emit_persona_mutated
from .archivo_service import ArchivoService
from .documento_service import check_can_delete, resolve_archivo_de_persona
from .notificaciones import acting_user_id, notify_owner, notify_reviewers
from .verificacion_service import (
    apply_estado,
    record_reset,
    resolve_estado_inicial,
    validate_estado_con_observacion,
)

logger = logging.getLogger(__name__)

MATRICULA_MAX_LENGTH = 50


class TituloService:
    """Titles of a persona."""

    @staticmethod
    @transaction.atomic
    def create(user, dto: TituloCreateDTO) -> Titulo:
        """
        Create or update a title.

        A title with the same (persona, nombre_titulo, institucion,
        fecha_emision) is updated in place and its verification is reset:
        PENDIENTE, or the estado chosen by a privileged user.
        """
        try:
            persona = Persona.objects.get(pk=dto.persona_id)
        except Persona.DoesNotExist:
            raise ValidationError({'persona_id': 'Persona no encontrada'})

        errors = {}
        nombre = (dto.nombre_titulo or '').strip()
        if not nombre:
            errors['nombre_titulo'] = 'El nombre del título es obligatorio'
        matricula = (dto.matricula_prof or '').strip()
        if len(matricula) > MATRICULA_MAX_LENGTH:
            errors['matricula_prof'] = f'Máximo {MATRICULA_MAX_LENGTH} caracteres'
        tipo = None
        if not dto.id_tipo_titulo:
            errors['id_tipo_titulo'] = 'El tipo de título es obligatorio'
        else:
            tipo = TipoTitulo.objects.filter(pk=dto.id_tipo_titulo).first()
            if tipo is None:
                errors['id_tipo_titulo'] = 'Tipo de título inválido'
        if errors:
            raise ValidationError(errors)

        archivo = resolve_archivo_de_persona(dto.id_archivo, persona.pk)
        estado = resolve_estado_inicial(user, dto.id_estado_verificacion)
        observacion = validate_estado_con_observacion(estado, dto.observacion)
        institucion = (dto.institucion or '').strip()

        titulo = Titulo.objects.select_for_update().filter(
            persona=persona,
            nombre_titulo=nombre,
            institucion=institucion,
            fecha_emision=dto.fecha_emision,
        ).first()
        updating = titulo is not None
        previous_archivo_id = titulo.archivo_id if updating else None

        if titulo is None:
            titulo = Titulo(persona=persona, nombre_titulo=nombre, institucion=institucion,
                            fecha_emision=dto.fecha_emision)
        titulo.tipo_titulo = tipo
        titulo.matricula_prof = matricula
        if archivo is not None:
            titulo.archivo = archivo
        titulo.estado_verificacion = estado
        titulo.verificado_por = None
        titulo.verificado_en = None
        titulo.stamp(user)
        titulo.save()

        if updating:
            logger.info(f"Titulo {titulo.pk} actualizado, verificación reiniciada a {estado.codigo}")
            if archivo is not None and previous_archivo_id and previous_archivo_id != archivo.pk:
                ArchivoService.delete_if_orphan(previous_archivo_id)

        if estado.codigo != 'PENDIENTE':
            apply_estado(titulo, estado, user, observacion, VerificacionTitulo, 'titulo')
        elif updating:
            record_reset(titulo, user, VerificacionTitulo, 'titulo')

        emit_persona_mutated(TituloService, persona.pk, user, 'titulo_creado')
        return titulo

    @staticmethod
    @transaction.atomic
    def change_state(user, dto: CambioEstadoDTO) -> Titulo:
        try:
            titulo = Titulo.objects.select_related('persona').select_for_update(of=('self',)).get(pk=dto.entity_id)
        except Titulo.DoesNotExist:
            raise ValidationError({'id': 'Título no encontrado'})

        estado = EstadoVerificacion.resolve(dto.id_estado_verificacion)
        observacion = validate_estado_con_observacion(estado, dto.observacion)
        apply_estado(titulo, estado, user, observacion, VerificacionTitulo, 'titulo')

        logger.info(f"Titulo {titulo.pk} -> {estado.codigo} por {acting_user_id(user)}")

        nivel = nivel_notificacion(estado.codigo)
        persona = titulo.persona
        notify_owner(persona, {
            'tipo': 'TITULO_ESTADO',
            'mensaje': f'Tu título "{titulo.nombre_titulo}" ha sido {estado.codigo}',
            'observacion': observacion or None,
            'meta': {'id_titulo': titulo.pk, 'estado': estado.codigo, 'observacion': observacion or None},
            'nivel': nivel,
        })
        notify_reviewers(persona.pk, {
            'tipo': 'TITULO_VERIFICADO',
            'mensaje': f'Título "{titulo.nombre_titulo}" de {persona.full_name} marcado como {estado.codigo}',
            'observacion': observacion or None,
            'meta': {'id_titulo': titulo.pk, 'estado': estado.codigo, 'actor': acting_user_id(user)},
            'nivel': nivel,
        })

        emit_persona_mutated(TituloService, persona.pk, user, 'titulo_estado')
        return titulo

    @staticmethod
    @transaction.atomic
    def delete(user, persona_id, titulo_id) -> dict:
        titulo = Titulo.objects.select_related('persona', 'archivo').get(pk=titulo_id)
        if str(titulo.persona_id) != str(persona_id):
            raise ValidationError('Título no pertenece a la persona indicada')

        check_can_delete(user, titulo, 'título')

        persona = titulo.persona
        archivo_id = titulo.archivo_id
        snapshot = {
            'id': titulo.pk,
            'id_persona': persona.pk,
            'nombre_titulo': titulo.nombre_titulo,
            'id_archivo': archivo_id,
        }
        titulo.delete()
        logger.info(f"Titulo {titulo_id} de persona {persona.pk} eliminado por {acting_user_id(user)}")

        notify_owner(persona, {
            'tipo': 'TITULO_ELIMINADO',
            'mensaje': f'Se eliminó tu título "{snapshot["nombre_titulo"]}"',
            'meta': {'id_titulo': snapshot['id'], 'id_persona': persona.pk},
            'nivel': 'warning',
        })
        notify_reviewers(persona.pk, {
            'tipo': 'TITULO_ELIMINADO',
            'mensaje': f'{persona.full_name}: título eliminado ({snapshot["nombre_titulo"]})',
            'meta': {'id_titulo': snapshot['id'], 'id_persona': persona.pk, 'eliminado_por': acting_user_id(user)},
            'nivel': 'warning',
        })

        try:
            with transaction.atomic():
                ArchivoService.delete_if_orphan(archivo_id)
        except Exception as e:
            logger.warning(f"Error al limpiar archivo {archivo_id}: {e}")

        emit_persona_mutated(TituloService, persona.pk, user, 'titulo_eliminado')
        return snapshot

    @staticmethod
    def list_for_persona(persona_id):
        return Titulo.objects.filter(persona_id=persona_id).select_related(
            'tipo_titulo', 'archivo', 'estado_verificacion', 'verificado_por'
        ).prefetch_related('verificaciones')
