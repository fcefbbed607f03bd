from django.contrib.auth import login as session_login, logout as session_logout
from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from apps.reviews import errors
from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
)


# Response serializers for API documentation
class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.DictField()


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new user account and start a session.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('password_confirm', None)

    try:
        user = register_user(**data)
    except UserRegistrationError as e:
        return Response(
            errors.service_error(e),
            status=status.HTTP_400_BAD_REQUEST
        )

    session_login(request, user)

    return Response({
        'message': 'Registration successful',
        'user': UserSerializer(user).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password and start a session.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password'],
        )
    except InvalidCredentialsError as e:
        return Response(errors.service_error(e), status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response(
            errors.service_error(e),
            status=status.HTTP_403_FORBIDDEN
        )

    session_login(request, user)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
    })


@extend_schema(
    request=None,
    responses={200: MessageResponseSerializer},
    description="End the current session.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def logout(request):
    """Flush the session."""
    session_logout(request)
    return Response({'message': 'Logout successful'})


@extend_schema(
    responses={
        200: UserSerializer,
        401: ErrorResponseSerializer,
    },
    description="Get the user attached to the current session.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def get_current_user(request):
    """Get current session user profile."""
    if not request.user.is_authenticated:
        return Response(
            errors.unauthorized('로그인이 필요합니다.'),
            status=status.HTTP_401_UNAUTHORIZED
        )
    return Response(UserSerializer(request.user).data)
