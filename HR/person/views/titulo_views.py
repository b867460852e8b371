from django.core.exceptions import ValidationError
from django.db import transaction
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from core.job_roles.decorators import forbidden, require_page_action
from core.job_roles.services import is_privileged, user_owns_persona
from HR.person.models import EliminacionSolicitud, TipoTitulo, Titulo
from HR.person.serializers import (
    CambioEstadoSerializer,
    TipoTituloSerializer,
    TituloCreateSerializer,
    TituloSerializer,
)
from HR.person.services import TituloService
from .documento_views import solicitar_eliminacion

@api_view(['GET', 'POST'])
@require_page_action('hr_titulos')
def titulo_list(request):
    """
    GET /titulos/?persona=<id>
    POST /titulos/ {"id_persona", "id_tipo_titulo", "nombre_titulo", ...}

    Re-posting a title with the same nombre, institucion and fecha_emision
    updates it and resets its verification.
    """
    if request.method == 'GET':
        persona_id = request.query_params.get('persona')
        if not persona_id:
            return Response({'detail': 'El parámetro persona es obligatorio'}, status=status.HTTP_400_BAD_REQUEST)
        if not (is_privileged(request.user) or user_owns_persona(request.user, persona_id)):
            return forbidden('Solo podés acceder a tu propio legajo')
        titulos = TituloService.list_for_persona(persona_id)
        return Response(TituloSerializer(titulos, many=True).data, status=status.HTTP_200_OK)

    serializer = TituloCreateSerializer(data=request.data)
    if serializer.is_valid():
        persona_id = serializer.validated_data['id_persona']
        if not (is_privileged(request.user) or user_owns_persona(request.user, persona_id)):
            return forbidden('Solo podés acceder a tu propio legajo')
        try:
            with transaction.atomic():
                titulo = TituloService.create(request.user, serializer.to_dto())
            return Response(TituloSerializer(titulo).data, status=status.HTTP_201_CREATED)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['PATCH'])
@require_page_action('hr_verificacion', 'edit')
def titulo_estado(request, pk):
    """PATCH /titulos/<pk>/estado/"""
    get_object_or_404(Titulo, pk=pk)
    serializer = CambioEstadoSerializer(data=request.data)
    if serializer.is_valid():
        try:
            with transaction.atomic():
                titulo = TituloService.change_state(request.user, serializer.to_dto(pk))
            return Response(TituloSerializer(titulo).data, status=status.HTTP_200_OK)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['DELETE'])
@require_page_action('hr_titulos')
def titulo_delete(request, persona_id, titulo_id):
    """
    DELETE /personas/<persona_id>/titulos/<titulo_id>/

    Allowed for privileged roles and for the user who uploaded the file.
    """
    get_object_or_404(Titulo, pk=titulo_id)
    try:
        with transaction.atomic():
            eliminado = TituloService.delete(request.user, persona_id, titulo_id)
        return Response(eliminado, status=status.HTTP_200_OK)
    except ValidationError as e:
        error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
        return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)


@api_view(['POST'])
@require_page_action('hr_titulos', 'create')
def titulo_solicitar_eliminacion(request, pk):
    """POST /titulos/<pk>/solicitar-eliminacion/ {"motivo": "..."}"""
    return solicitar_eliminacion(request, EliminacionSolicitud.Tipo.TITULO, pk)


@api_view(['GET'])
@require_page_action('hr_titulos', 'view')
def tipo_titulo_list(request):
    tipos = TipoTitulo.objects.all()
    return Response(TipoTituloSerializer(tipos, many=True).data, status=status.HTTP_200_OK)
