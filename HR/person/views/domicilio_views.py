from django.core.exceptions import ValidationError
from django.db import transaction
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from core.job_roles.decorators import require_page_action, require_persona_access
from HR.person.models import (
    Domicilio,
    DomBarrio,
    DomDepartamento,
    DomLocalidad,
    EliminacionSolicitud,
    Persona,
)
from HR.person.serializers import (
    BarrioCreateSerializer,
    DomBarrioSerializer,
    DomDepartamentoSerializer,
    DomLocalidadSerializer,
    DomicilioCreateSerializer,
    DomicilioSerializer,
    PersonaBarrioAssignSerializer,
    PersonaBarrioSerializer,
)
from HR.person.services import DomicilioService
from .documento_views import solicitar_eliminacion


@api_view(['GET', 'POST'])
@require_page_action('hr_domicilios')
@require_persona_access('persona_id')
def domicilio_list(request, persona_id):
    """
    GET /personas/<persona_id>/domicilios/
    POST /personas/<persona_id>/domicilios/ {"calle", "altura", "id_dom_barrio"}
    """
    get_object_or_404(Persona, pk=persona_id)

    if request.method == 'GET':
        domicilios = DomicilioService.list_domicilios(persona_id)
        return Response(DomicilioSerializer(domicilios, many=True).data, status=status.HTTP_200_OK)

    serializer = DomicilioCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            with transaction.atomic():
                domicilio = DomicilioService.create_domicilio(request.user, serializer.to_dto(persona_id))
            return Response(DomicilioSerializer(domicilio).data, status=status.HTTP_201_CREATED)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['DELETE'])
@require_page_action('hr_domicilios')
def domicilio_delete(request, persona_id, domicilio_id):
    """
    DELETE /personas/<persona_id>/domicilios/<domicilio_id>/

    Reviewers or the persona owning the domicilio.
    """
    get_object_or_404(Domicilio, pk=domicilio_id)
    try:
        with transaction.atomic():
            eliminado = DomicilioService.delete_domicilio(request.user, persona_id, domicilio_id)
        return Response(eliminado, status=status.HTTP_200_OK)
    except ValidationError as e:
        error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
        return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)


@api_view(['POST'])
@require_page_action('hr_domicilios', 'create')
def domicilio_solicitar_eliminacion(request, pk):
    """POST /domicilios/<pk>/solicitar-eliminacion/ {"motivo": "..."}"""
    return solicitar_eliminacion(request, EliminacionSolicitud.Tipo.DOMICILIO, pk)


@api_view(['GET', 'POST'])
@require_page_action('hr_domicilios')
@require_persona_access('persona_id')
def persona_barrio_list(request, persona_id):
    """
    Barrios assigned to a persona.

    POST {"id_dom_barrio": <id>} is idempotent.
    """
    get_object_or_404(Persona, pk=persona_id)

    if request.method == 'GET':
        asignaciones = DomicilioService.list_barrios(persona_id)
        return Response(PersonaBarrioSerializer(asignaciones, many=True).data, status=status.HTTP_200_OK)

    serializer = PersonaBarrioAssignSerializer(data=request.data)
    if serializer.is_valid():
        try:
            with transaction.atomic():
                asignacion = DomicilioService.assign_barrio(
                    request.user, persona_id, serializer.validated_data['id_dom_barrio']
                )
            return Response(PersonaBarrioSerializer(asignacion).data, status=status.HTTP_201_CREATED)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['DELETE'])
@require_page_action('hr_domicilios')
@require_persona_access('persona_id')
def persona_barrio_delete(request, persona_id, barrio_id):
    try:
        with transaction.atomic():
            DomicilioService.unassign_barrio(request.user, persona_id, barrio_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
    except ValidationError as e:
        error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
        return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
@require_page_action('hr_domicilios', 'view')
def departamento_list(request):
    departamentos = DomDepartamento.objects.all()
    return Response(DomDepartamentoSerializer(departamentos, many=True).data, status=status.HTTP_200_OK)


@api_view(['GET'])
@require_page_action('hr_domicilios', 'view')
def localidad_list(request):
    """GET /dom-otros/localidades/?depto=<id>"""
    localidades = DomLocalidad.objects.all()
    depto = request.query_params.get('depto')
    if depto:
        localidades = localidades.filter(departamento_id=depto)
    return Response(DomLocalidadSerializer(localidades, many=True).data, status=status.HTTP_200_OK)


@api_view(['GET', 'POST'])
@require_page_action('hr_domicilios')
def localidad_barrio_list(request, localidad_id):
    """
    GET /dom-otros/localidades/<localidad_id>/barrios/
    POST /dom-otros/localidades/<localidad_id>/barrios/ {"barrio", "manzana", "casa", "departamento", "piso"}
    """
    get_object_or_404(DomLocalidad, pk=localidad_id)

    if request.method == 'GET':
        barrios = DomBarrio.objects.filter(localidad_id=localidad_id).select_related('localidad__departamento')
        return Response(DomBarrioSerializer(barrios, many=True).data, status=status.HTTP_200_OK)

    serializer = BarrioCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            with transaction.atomic():
                barrio = DomicilioService.create_barrio(request.user, serializer.to_dto(localidad_id))
            return Response(DomBarrioSerializer(barrio).data, status=status.HTTP_201_CREATED)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else e.messages
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
