"""
Deletion requests.

Users who cannot delete a document, domicilio or title directly ask for
its deletion. The request is stored and reviewers are notified; the target
record is not modified.
"""
import logging

from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction

from core.job_roles.services import is_privileged, user_owns_persona
from core.notifications.services import notify_safely, notify_user
from HR.person.dtos import EliminacionSolicitudDTO
from HR.person.models import Domicilio, EliminacionSolicitud, PersonaDocumento, Titulo
from HR.person.models.eliminacion import MOTIVO_MAX_LENGTH
from .notificaciones import acting_user_id, notify_reviewers

logger = logging.getLogger(__name__)

_TARGETS = {
    EliminacionSolicitud.Tipo.DOCUMENTO: (PersonaDocumento, 'DOC_DELETE_SOLICITUD'),
    EliminacionSolicitud.Tipo.DOMICILIO: (Domicilio, 'DOMI_DELETE_SOLICITUD'),
    EliminacionSolicitud.Tipo.TITULO: (Titulo, 'TITULO_DELETE_SOLICITUD'),
}


class TargetNotFound(Exception):
    """The record whose deletion is requested does not exist."""


def clean_motivo(motivo):
    """Strip the motivo; empty becomes None. At most 300 characters."""
    value = str(motivo).strip() if motivo is not None else ''
    if len(value) > MOTIVO_MAX_LENGTH:
        raise ValidationError({'motivo': f'Máximo {MOTIVO_MAX_LENGTH} caracteres'})
    return value or None


def _describe(tipo, target):
    if tipo == EliminacionSolicitud.Tipo.DOCUMENTO:
        return f'"{target.tipo_doc.nombre}"'
    if tipo == EliminacionSolicitud.Tipo.DOMICILIO:
        return f'el domicilio "{target.calle} {target.altura}"'
    return f'el título "{target.nombre_titulo}"'


class EliminacionService:

    @staticmethod
    @transaction.atomic
    def solicitar(user, dto: EliminacionSolicitudDTO) -> EliminacionSolicitud:
        """
        Raises:
            TargetNotFound: the target record does not exist
            PermissionDenied: the user neither owns the persona nor is privileged
            ValidationError: motivo too long or unknown tipo
        """
        if dto.tipo not in _TARGETS:
            raise ValidationError({'tipo': 'Tipo de solicitud inválido'})
        model, notif_tipo = _TARGETS[dto.tipo]

        target = model.objects.select_related('persona').filter(pk=dto.objetivo_id).first()
        if target is None:
            raise TargetNotFound(f'{model._meta.verbose_name} no encontrado')

        persona = target.persona
        if not (is_privileged(user) or user_owns_persona(user, persona.pk)):
            raise PermissionDenied('Solo podés solicitar la eliminación de registros de tu propio legajo')

        motivo = clean_motivo(dto.motivo)
        solicitud = EliminacionSolicitud.objects.create(
            tipo=dto.tipo,
            objetivo_id=target.pk,
            persona=persona,
            motivo=motivo,
            solicitado_por=user if getattr(user, 'is_authenticated', False) else None,
        )
        logger.info(f"Solicitud de eliminación {solicitud.pk}: {dto.tipo} {target.pk} de persona {persona.pk}")

        descripcion = _describe(dto.tipo, target)
        notify_reviewers(persona.pk, {
            'tipo': notif_tipo,
            'mensaje': f'{persona.full_name} solicitó eliminar {descripcion}',
            'meta': {'id_solicitud': solicitud.pk, 'objetivo_id': target.pk, 'motivo': motivo},
            'nivel': 'warning',
        })
        requester_id = acting_user_id(user)
        if requester_id:
            notify_safely(notify_user, requester_id, {
                'tipo': notif_tipo,
                'mensaje': f'Tu solicitud de eliminación de {descripcion} fue enviada',
                'link': '/dashboard/legajo',
                'meta': {'id_solicitud': solicitud.pk, 'objetivo_id': target.pk},
            })
        return solicitud

    @staticmethod
    def list_solicitudes(estado=None, persona_id=None):
        queryset = EliminacionSolicitud.objects.select_related('persona', 'solicitado_por')
        if estado:
            queryset = queryset.filter(estado=estado.upper())
        if persona_id:
            queryset = queryset.filter(persona_id=persona_id)
        return queryset
