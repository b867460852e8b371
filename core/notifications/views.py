from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from rrhh_project.pagination import auto_paginate
from .models import Notificacion
from .serializers import NotificacionSerializer
from . import services


@api_view(['GET'])
@auto_paginate
def notificacion_list(request):
    """
    GET /notificaciones/
    Notifications of the current user, newest first.
    - Filters: leida (true/false)
    """
    notificaciones = Notificacion.objects.filter(usuario=request.user)

    leida = request.query_params.get('leida')
    if leida is not None:
        notificaciones = notificaciones.filter(leida=leida.lower() in ('1', 'true'))

    serializer = NotificacionSerializer(notificaciones, many=True)
    return Response(serializer.data, status=status.HTTP_200_OK)


@api_view(['POST'])
def notificacion_leer(request, pk):
    """POST /notificaciones/<id>/leer/"""
    notificacion = services.mark_as_read(request.user, pk)
    if notificacion is None:
        return Response({'detail': 'Notificación no encontrada'}, status=status.HTTP_404_NOT_FOUND)
    return Response(NotificacionSerializer(notificacion).data, status=status.HTTP_200_OK)


@api_view(['POST'])
def notificacion_leer_todas(request):
    """POST /notificaciones/marcar-todas-leidas/"""
    total = services.mark_all_as_read(request.user)
    return Response({'total': total}, status=status.HTTP_200_OK)


@api_view(['DELETE'])
def notificacion_detail(request, pk):
    """DELETE /notificaciones/<id>/"""
    deleted, _ = Notificacion.objects.filter(pk=pk, usuario=request.user).delete()
    if not deleted:
        return Response({'detail': 'Notificación no encontrada'}, status=status.HTTP_404_NOT_FOUND)
    return Response(status=status.HTTP_204_NO_CONTENT)
