"""
File upload, signed preview URLs and download.
"""
import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction
from django.http import FileResponse, Http404, HttpResponseForbidden
from django.shortcuts import get_object_or_404
from django.urls import reverse
from rest_framework import status
from rest_framework.decorators import api_view, parser_classes
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response

from core.job_roles.decorators import forbidden, require_page_action, require_persona_access
from core.job_roles.services import is_privileged, user_owns_persona
from HR.person.models import Archivo, Persona
from HR.person.serializers import ArchivoSerializer, ArchivoUploadSerializer
from HR.person.services import ArchivoService

logger = logging.getLogger(__name__)


@api_view(['POST'])
@parser_classes([MultiPartParser, FormParser])
@require_page_action('hr_archivos', 'create')
@require_persona_access('persona_id')
def archivo_upload(request, persona_id):
    """
    POST /archivos/persona/<persona_id>/ (multipart, field "archivo")

    Returns the stored Archivo; its id_archivo is then linked from a
    document or title.
    """
    get_object_or_404(Persona, pk=persona_id)
    serializer = ArchivoUploadSerializer(data=request.data)
    if serializer.is_valid():
        try:
            with transaction.atomic():
                archivo = ArchivoService.upload(request.user, persona_id, serializer.validated_data['archivo'])
            return Response(ArchivoSerializer(archivo).data, status=status.HTTP_201_CREATED)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
@require_page_action('hr_archivos', 'view')
def archivo_signed_url(request, pk):
    """
    GET /archivos/<pk>/signed-url/ -> {"url": ..., "expires_in": <seconds>}
    """
    archivo = get_object_or_404(Archivo, pk=pk)
    if not (
        is_privileged(request.user)
        or archivo.is_uploaded_by(request.user)
        or (archivo.persona_id and user_owns_persona(request.user, archivo.persona_id))
    ):
        return forbidden('No autorizado para ver este archivo')

    token = ArchivoService.make_token(archivo)
    url = request.build_absolute_uri(reverse('person:archivo_descargar', args=[token]))
    return Response({
        'url': url,
        'expires_in': getattr(settings, 'ARCHIVO_SIGNED_URL_TTL', 300),
    }, status=status.HTTP_200_OK)


def archivo_descargar(request, token):
    """
    GET /archivos/descargar/<token>/

    Plain Django view: the signed token is the credential.
    """
    try:
        archivo = ArchivoService.resolve_token(token)
    except ValidationError as e:
        logger.info(f"Descarga rechazada: {e.messages}")
        return HttpResponseForbidden(e.messages[0])

    try:
        handle = archivo.archivo.open('rb')
    except (FileNotFoundError, ValueError):
        raise Http404('Archivo no disponible')

    return FileResponse(
        handle,
        filename=archivo.nombre_original,
        content_type=archivo.content_type or None,
    )
