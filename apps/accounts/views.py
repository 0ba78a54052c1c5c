from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema
import logging

from .permissions import IsAdminRole
from .serializers import (
    UserSerializer,
    UserLoginSerializer,
    CookCreateSerializer,
)
from .services import (
    authenticate_user,
    list_cooks,
    create_cook,
    remove_user,
    InvalidCredentialsError,
    InactiveAccountError,
    DuplicateEmailError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        user = authenticate_user(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password'],
        )
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    refresh = RefreshToken.for_user(user)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile and role.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return Response(UserSerializer(request.user).data)


@extend_schema(
    methods=['GET'],
    responses={200: UserSerializer(many=True)},
    description="List active cook accounts (admin only).",
    tags=['users'],
)
@extend_schema(
    methods=['POST'],
    request=CookCreateSerializer,
    responses={201: UserSerializer, 400: ErrorResponseSerializer},
    description="Create a cook account (admin only).",
    tags=['users'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def cooks(request):
    """List or create cook accounts."""
    if request.method == 'GET':
        return Response(UserSerializer(list_cooks(), many=True).data)

    serializer = CookCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = create_cook(**serializer.validated_data)
    except DuplicateEmailError as e:
        logger.warning("Cook creation rejected: %s", e)
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={204: None, 404: ErrorResponseSerializer},
    description="Soft-delete a cook account (admin only). Admin accounts cannot be removed.",
    tags=['users'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated, IsAdminRole])
def delete_user(request, pk):
    """Soft-delete a user."""
    if str(request.user.id) == str(pk):
        return Response(
            {'error': 'No puedes eliminar tu propia cuenta'},
            status=status.HTTP_400_BAD_REQUEST
        )

    try:
        remove_user(user_id=pk)
    except UserNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(status=status.HTTP_204_NO_CONTENT)
