"""
Authentication endpoints.

POST /auth/login/ trades email and password for a JWT pair; GET /auth/me/
returns the account with its roles, its persona and the pages it can use.
"""
import logging

from django.contrib.auth import authenticate
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken

from core.job_roles.services import get_user_all_permissions
from .serializers import LoginSerializer, UserProfileSerializer

logger = logging.getLogger(__name__)


def _token_pair(user):
    refresh = RefreshToken.for_user(user)
    return {'refresh': str(refresh), 'access': str(refresh.access_token)}


@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    serializer = LoginSerializer(data=request.data)
    if not serializer.is_valid():
        return Response({'error': 'Ingresá email y contraseña'}, status=status.HTTP_400_BAD_REQUEST)

    email = serializer.validated_data['email']
    user = authenticate(request, username=email, password=serializer.validated_data['password'])
    if user is None:
        logger.info(f"Login rechazado para {email}")
        return Response({'error': 'Credenciales inválidas'}, status=status.HTTP_401_UNAUTHORIZED)

    return Response(
        {'user': UserProfileSerializer(user).data, 'tokens': _token_pair(user)},
        status=status.HTTP_200_OK,
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me(request):
    profile = UserProfileSerializer(request.user).data
    profile['permissions'] = get_user_all_permissions(request.user)
    return Response(profile, status=status.HTTP_200_OK)
