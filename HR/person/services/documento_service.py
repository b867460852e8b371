import logging

from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction

from core.job_roles.services import is_privileged
from HR.person.dtos import DocumentoCreateDTO, CambioEstadoDTO
from HR.person.models import (
    Archivo,
    EstadoVerificacion,
    Persona,
    PersonaDocumento,
    TipoDocumento,
    VerificacionDocumento,
    nivel_notificacion,
)
from HR.person.signals import emit_persona_mutated
from .archivo_service import ArchivoService
from .notificaciones import acting_user_id, notify_owner, notify_reviewers
from .verificacion_service import apply_estado, resolve_estado_inicial, validate_estado_con_observacion

logger = logging.getLogger(__name__)


def resolve_tipo_documento(value) -> TipoDocumento:
    raw = str(value if value is not None else '').strip()
    if not raw:
        raise ValidationError({'id_tipo_doc': 'Tipo de documento requerido'})
    try:
        if raw.isdigit():
            return TipoDocumento.objects.get(pk=int(raw))
        return TipoDocumento.objects.get(codigo=raw.upper())
    except TipoDocumento.DoesNotExist:
        raise ValidationError({'id_tipo_doc': 'Tipo de documento inválido'})


def resolve_archivo_de_persona(archivo_id, persona_id):
    """Archivo linked to a new document or title; it must not belong to another persona."""
    if not archivo_id:
        return None
    try:
        archivo = Archivo.objects.get(pk=archivo_id)
    except Archivo.DoesNotExist:
        raise ValidationError({'id_archivo': 'Archivo no encontrado'})
    if archivo.persona_id is not None and archivo.persona_id != int(persona_id):
        raise ValidationError({'id_archivo': 'El archivo pertenece a otra persona'})
    return archivo


def check_can_delete(user, entity, label):
    """Privileged roles or the uploader of the linked file may delete."""
    if is_privileged(user):
        return
    if entity.archivo is not None and entity.archivo.is_uploaded_by(user):
        return
    raise PermissionDenied(f'No autorizado para eliminar este {label}')


class DocumentoService:
    """Documents of a persona and their verification state."""

    @staticmethod
    @transaction.atomic
    def create(user, dto: DocumentoCreateDTO) -> PersonaDocumento:
        """
        Create a document for a persona.

        - Non privileged users always create in PENDIENTE.
        - Privileged users may choose the estado; RECHAZADO/OBSERVADO need an
          observacion and any non PENDIENTE estado is recorded as a verification.
        - A new vigente document retires the previous vigente ones of its type.
        """
        try:
            persona = Persona.objects.get(pk=dto.persona_id)
        except Persona.DoesNotExist:
            raise ValidationError({'persona_id': 'Persona no encontrada'})

        tipo = resolve_tipo_documento(dto.id_tipo_doc)
        archivo = resolve_archivo_de_persona(dto.id_archivo, persona.pk)
        estado = resolve_estado_inicial(user, dto.id_estado_verificacion)
        observacion = validate_estado_con_observacion(estado, dto.observacion)

        if dto.vigente:
            retired = PersonaDocumento.objects.filter(
                persona=persona, tipo_doc=tipo, vigente=True
            ).update(vigente=False)
            if retired:
                logger.info(f"{retired} documento(s) {tipo.codigo} de persona {persona.pk} ya no vigentes")

        documento = PersonaDocumento(
            persona=persona,
            tipo_doc=tipo,
            archivo=archivo,
            vigente=dto.vigente,
        )
        documento.stamp(user)
        documento.save()

        if estado.codigo != 'PENDIENTE':
            apply_estado(documento, estado, user, observacion, VerificacionDocumento, 'documento')

        emit_persona_mutated(DocumentoService, persona.pk, user, 'documento_creado')
        return documento

    @staticmethod
    @transaction.atomic
    def change_state(user, dto: CambioEstadoDTO) -> PersonaDocumento:
        try:
            documento = PersonaDocumento.objects.select_related(
                'persona', 'tipo_doc'
            ).select_for_update(of=('self',)).get(pk=dto.entity_id)
        except PersonaDocumento.DoesNotExist:
            raise ValidationError({'id': 'Documento no encontrado'})

        estado = EstadoVerificacion.resolve(dto.id_estado_verificacion)
        observacion = validate_estado_con_observacion(estado, dto.observacion)
        apply_estado(documento, estado, user, observacion, VerificacionDocumento, 'documento')

        logger.info(f"Documento {documento.pk} -> {estado.codigo} por {acting_user_id(user)}")

        nivel = nivel_notificacion(estado.codigo)
        persona = documento.persona
        notify_owner(persona, {
            'tipo': 'DOC_ESTADO',
            'mensaje': f'Tu documento "{documento.tipo_doc.nombre}" ha sido {estado.nombre}',
            'observacion': observacion or None,
            'meta': {'id_persona_doc': documento.pk, 'estado': estado.codigo},
            'nivel': nivel,
        })
        notify_reviewers(persona.pk, {
            'tipo': 'DOC_VERIFICADO',
            'mensaje': f'"{documento.tipo_doc.nombre}" de {persona.full_name} marcado como {estado.nombre}',
            'meta': {
                'id_persona_doc': documento.pk,
                'estado': estado.codigo,
                'verificado_por': acting_user_id(user),
            },
            'nivel': nivel,
        })

        emit_persona_mutated(DocumentoService, persona.pk, user, 'documento_estado')
        return documento

    @staticmethod
    @transaction.atomic
    def delete(user, persona_id, documento_id) -> dict:
        """
        Delete a document of a persona.

        Raises:
            ValidationError: the document is not the persona's
            PermissionDenied: the user is neither privileged nor the uploader
        """
        documento = PersonaDocumento.objects.select_related(
            'persona', 'tipo_doc', 'archivo'
        ).get(pk=documento_id)
        if str(documento.persona_id) != str(persona_id):
            raise ValidationError('Documento no pertenece a la persona indicada')

        check_can_delete(user, documento, 'documento')

        persona = documento.persona
        archivo_id = documento.archivo_id
        snapshot = {
            'id': documento.pk,
            'id_persona': persona.pk,
            'id_tipo_doc': documento.tipo_doc_id,
            'tipo_codigo': documento.tipo_doc.codigo,
            'id_archivo': archivo_id,
        }
        documento.delete()
        logger.info(f"Documento {documento_id} de persona {persona.pk} eliminado por {acting_user_id(user)}")

        meta = {
            'id_persona_doc': snapshot['id'],
            'id_persona': persona.pk,
            'id_archivo': archivo_id,
            'tipo': documento.tipo_doc.nombre,
        }
        notify_owner(persona, {
            'tipo': 'DOC_ELIMINADO',
            'mensaje': f'Se eliminó tu documento "{documento.tipo_doc.nombre}"',
            'meta': meta,
            'nivel': 'warning',
        })
        notify_reviewers(persona.pk, {
            'tipo': 'DOC_ELIMINADO',
            'mensaje': f'{persona.full_name}: documento eliminado ({documento.tipo_doc.nombre})',
            'meta': {**meta, 'eliminado_por': acting_user_id(user)},
            'nivel': 'warning',
        })

        try:
            with transaction.atomic():
                ArchivoService.delete_if_orphan(archivo_id)
        except Exception as e:
            logger.warning(f"Error al limpiar archivo {archivo_id}: {e}")

        emit_persona_mutated(DocumentoService, persona.pk, user, 'documento_eliminado')
        return snapshot

    @staticmethod
    def list_for_persona(persona_id, solo_vigentes=False):
        queryset = PersonaDocumento.objects.filter(persona_id=persona_id).select_related(
            'tipo_doc', 'archivo', 'archivo__subido_por', 'estado_verificacion', 'verificado_por'
        ).prefetch_related('verificaciones')
        if solo_vigentes:
            queryset = queryset.filter(vigente=True)
        return queryset
