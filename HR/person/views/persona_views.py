from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Q
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from core.job_roles.decorators import require_page_action, require_persona_access
from core.job_roles.services import get_user_persona_id, is_privileged
from HR.person.models import Persona, PersonaIdentificacion
from HR.person.serializers import (
    PersonaSerializer,
    PersonaCreateSerializer,
    PersonaUpdateSerializer,
    PersonaIdentificacionSerializer,
    PersonaIdentificacionWriteSerializer,
)
from HR.person.services import PersonaService
from rrhh_project.pagination import auto_paginate


@api_view(['GET', 'POST'])
@require_page_action('hr_personas')
@auto_paginate
def persona_list(request):
    """
    List personas or create a new one.

    GET /personas/?q=<text>
        Privileged users see every persona, others only their own.
    POST /personas/
        Non privileged users can only create their own persona, linked to
        their account.
    """
    if request.method == 'GET':
        personas = Persona.objects.select_related('identificacion')
        if not is_privileged(request.user):
            personas = personas.filter(usuario=request.user)

        q = request.query_params.get('q')
        if q:
            personas = personas.filter(
                Q(nombre__icontains=q) | Q(apellido__icontains=q) | Q(identificacion__dni__icontains=q)
            )

        serializer = PersonaSerializer(personas, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    serializer = PersonaCreateSerializer(data=request.data)
    if serializer.is_valid():
        dto = serializer.to_dto()
        if not is_privileged(request.user):
            if get_user_persona_id(request.user) is not None:
                return Response(
                    {'detail': 'Tu usuario ya tiene una persona asociada'},
                    status=status.HTTP_400_BAD_REQUEST
                )
            dto.usuario_id = request.user.pk
        try:
            with transaction.atomic():
                persona = PersonaService.create(request.user, dto)
            return Response(PersonaSerializer(persona).data, status=status.HTTP_201_CREATED)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'PATCH'])
@require_page_action('hr_personas')
@require_persona_access('persona_id')
def persona_detail(request, persona_id):
    """
    GET /personas/<persona_id>/
    PATCH /personas/<persona_id>/
    """
    persona = get_object_or_404(Persona.objects.select_related('identificacion'), pk=persona_id)

    if request.method == 'GET':
        return Response(PersonaSerializer(persona).data, status=status.HTTP_200_OK)

    serializer = PersonaUpdateSerializer(data=request.data, partial=True)
    if serializer.is_valid():
        try:
            with transaction.atomic():
                persona = PersonaService.update(request.user, serializer.to_dto(persona.pk))
            return Response(PersonaSerializer(persona).data, status=status.HTTP_200_OK)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'POST'])
@require_page_action('hr_personas')
@require_persona_access('persona_id')
def persona_identificacion(request, persona_id):
    """
    Identification (DNI / CUIL) of a persona.

    GET returns null data when nothing was loaded yet.
    """
    get_object_or_404(Persona, pk=persona_id)

    if request.method == 'GET':
        identificacion = PersonaIdentificacion.objects.filter(persona_id=persona_id).first()
        data = PersonaIdentificacionSerializer(identificacion).data if identificacion else None
        return Response(data, status=status.HTTP_200_OK)

    serializer = PersonaIdentificacionWriteSerializer(data=request.data)
    if serializer.is_valid():
        try:
            with transaction.atomic():
                identificacion = PersonaService.set_identificacion(request.user, serializer.to_dto(persona_id))
            return Response(PersonaIdentificacionSerializer(identificacion).data, status=status.HTTP_200_OK)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
