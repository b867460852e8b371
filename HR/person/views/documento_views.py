from django.core.exceptions import ValidationError
from django.db import transaction
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from core.job_roles.decorators import require_page_action, require_persona_access
from HR.person.dtos import EliminacionSolicitudDTO
from HR.person.models import EliminacionSolicitud, Persona, PersonaDocumento, TipoDocumento
from HR.person.serializers import (
    CambioEstadoSerializer,
    EliminacionSolicitudSerializer,
    PersonaDocumentoCreateSerializer,
    PersonaDocumentoSerializer,
    SolicitarEliminacionSerializer,
    TipoDocumentoSerializer,
)
from HR.person.services import DocumentoService, EliminacionService, TargetNotFound


@api_view(['GET', 'POST'])
@require_page_action('hr_documentos')
@require_persona_access('persona_id')
def documento_list(request, persona_id):
    """
    GET /personas/<persona_id>/documentos/?vigentes=1
    POST /personas/<persona_id>/documentos/
    """
    get_object_or_404(Persona, pk=persona_id)

    if request.method == 'GET':
        solo_vigentes = request.query_params.get('vigentes') in ('1', 'true', 'True')
        documentos = DocumentoService.list_for_persona(persona_id, solo_vigentes=solo_vigentes)
        return Response(PersonaDocumentoSerializer(documentos, many=True).data, status=status.HTTP_200_OK)

    serializer = PersonaDocumentoCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            with transaction.atomic():
                documento = DocumentoService.create(request.user, serializer.to_dto(persona_id))
            return Response(PersonaDocumentoSerializer(documento).data, status=status.HTTP_201_CREATED)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['DELETE'])
@require_page_action('hr_documentos')
def documento_delete(request, persona_id, documento_id):
    """
    DELETE /personas/<persona_id>/documentos/<documento_id>/

    Allowed for privileged roles and for the user who uploaded the file.
    The file is removed as well when nothing else references it.
    """
    get_object_or_404(PersonaDocumento, pk=documento_id)
    try:
        with transaction.atomic():
            eliminado = DocumentoService.delete(request.user, persona_id, documento_id)
        return Response(eliminado, status=status.HTTP_200_OK)
    except ValidationError as e:
        error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
        return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)


@api_view(['PATCH'])
@require_page_action('hr_verificacion', 'edit')
def documento_estado(request, pk):
    """
    PATCH /documentos/<pk>/estado/
    {"id_estado_verificacion": 3 | "RECHAZADO", "observacion": "..."}
    """
    get_object_or_404(PersonaDocumento, pk=pk)
    serializer = CambioEstadoSerializer(data=request.data)
    if serializer.is_valid():
        try:
            with transaction.atomic():
                documento = DocumentoService.change_state(request.user, serializer.to_dto(pk))
            return Response(PersonaDocumentoSerializer(documento).data, status=status.HTTP_200_OK)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['POST'])
@require_page_action('hr_documentos', 'create')
def documento_solicitar_eliminacion(request, pk):
    """POST /documentos/<pk>/solicitar-eliminacion/ {"motivo": "..."}"""
    return solicitar_eliminacion(request, EliminacionSolicitud.Tipo.DOCUMENTO, pk)


@api_view(['GET'])
@require_page_action('hr_documentos', 'view')
def tipo_documento_list(request):
    tipos = TipoDocumento.objects.all()
    return Response(TipoDocumentoSerializer(tipos, many=True).data, status=status.HTTP_200_OK)


def solicitar_eliminacion(request, tipo, objetivo_id):
    """Shared body of the solicitar-eliminacion endpoints."""
    serializer = SolicitarEliminacionSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    dto = EliminacionSolicitudDTO(
        tipo=tipo,
        objetivo_id=objetivo_id,
        motivo=serializer.validated_data.get('motivo'),
    )
    try:
        with transaction.atomic():
            solicitud = EliminacionService.solicitar(request.user, dto)
        return Response(EliminacionSolicitudSerializer(solicitud).data, status=status.HTTP_201_CREATED)
    except TargetNotFound as e:
        return Response({'detail': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except ValidationError as e:
        error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
        return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
