from django.core.exceptions import ValidationError
from django.db import transaction
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from core.job_roles.decorators import require_page_action, require_persona_access
from HR.person.models import Persona
from rrhh_project.pagination import auto_paginate
from .models import LegajoHistorial
from .serializers import (
    EstadoManualSerializer,
    LegajoHistorialSerializer,
    PlazoGraciaCreateSerializer,
    PlazoGraciaSerializer,
)
from .services import LegajoService


@api_view(['POST'])
@require_page_action('hr_legajo', 'create')
@require_persona_access('persona_id')
def legajo_recalcular(request, persona_id):
    """
    POST /legajo/<persona_id>/recalcular/
    -> {"estado": "PENDIENTE", "anterior": ..., "checklist": {...}, "porcentaje": 40}
    """
    get_object_or_404(Persona, pk=persona_id)
    try:
        with transaction.atomic():
            resultado = LegajoService.recalcular(persona_id, request.user)
        return Response(resultado, status=status.HTTP_200_OK)
    except ValidationError as e:
        error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
        return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'POST'])
@require_persona_access('persona_id')
def legajo_estado(request, persona_id):
    """
    GET /legajo/<persona_id>/estado/
        {"estado": {codigo, nombre, actualizado_en} | null, "checklist": {...},
         "plazo": {...} | null, "porcentaje": n}
    POST /legajo/<persona_id>/estado/ {"codigo": "VALIDADO"}   (admin, rrhh)
    """
    get_object_or_404(Persona, pk=persona_id)
    if request.method == 'GET':
        return _legajo_estado_get(request, persona_id)
    return _legajo_estado_set(request, persona_id)


@require_page_action('hr_legajo', 'view')
def _legajo_estado_get(request, persona_id):
    return Response(LegajoService.get_estado(persona_id), status=status.HTTP_200_OK)


@require_page_action('hr_legajo_admin', 'edit')
def _legajo_estado_set(request, persona_id):
    serializer = EstadoManualSerializer(data=request.data)
    if serializer.is_valid():
        try:
            with transaction.atomic():
                LegajoService.set_estado_manual(request.user, serializer.to_dto(persona_id))
            return Response(LegajoService.get_estado(persona_id), status=status.HTTP_200_OK)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['POST'])
@require_page_action('hr_legajo_admin', 'create')
def legajo_plazo(request, persona_id):
    """POST /legajo/<persona_id>/plazo/ {"fecha_limite": "YYYY-MM-DD", "motivo": "..."}"""
    get_object_or_404(Persona, pk=persona_id)
    serializer = PlazoGraciaCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            with transaction.atomic():
                plazo = LegajoService.set_plazo(request.user, serializer.to_dto(persona_id))
            return Response(PlazoGraciaSerializer(plazo).data, status=status.HTTP_201_CREATED)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
@require_page_action('hr_legajo', 'view')
@require_persona_access('persona_id')
@auto_paginate
def legajo_historial(request, persona_id):
    """GET /legajo/<persona_id>/historial/"""
    get_object_or_404(Persona, pk=persona_id)
    historial = LegajoHistorial.objects.filter(persona_id=persona_id).select_related('estado')
    return Response(LegajoHistorialSerializer(historial, many=True).data, status=status.HTTP_200_OK)
