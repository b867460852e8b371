from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from core.job_roles.decorators import require_page_action
from HR.person.models import EstadoVerificacion
from HR.person.serializers import EliminacionSolicitudSerializer, EstadoVerificacionSerializer
from HR.person.services import EliminacionService
from rrhh_project.pagination import auto_paginate


@api_view(['GET'])
@require_page_action('hr_documentos', 'view')
def estado_verificacion_list(request):
    """GET /estados-verificacion/"""
    estados = EstadoVerificacion.objects.all()
    return Response(EstadoVerificacionSerializer(estados, many=True).data, status=status.HTTP_200_OK)


@api_view(['GET'])
@require_page_action('hr_eliminaciones', 'view')
@auto_paginate
def eliminacion_list(request):
    """
    Deletion requests waiting for review.

    GET /eliminaciones/?estado=PENDIENTE&persona=<id>
    """
    solicitudes = EliminacionService.list_solicitudes(
        estado=request.query_params.get('estado'),
        persona_id=request.query_params.get('persona'),
    )
    return Response(EliminacionSolicitudSerializer(solicitudes, many=True).data, status=status.HTTP_200_OK)
