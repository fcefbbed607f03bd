import logging

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.reviews import errors
from apps.reviews.views import ErrorResponseSerializer, session_user
from .models import Rating
from .serializers import (
    RatingSerializer,
    RatingCreateSerializer,
    RatingUpdateSerializer,
    RatingSummarySerializer,
)
from .services import (
    get_book_ratings,
    get_rating_summary,
    post_rating,
    patch_rating,
    delete_rating,
    RatingNotFoundError,
    UnauthorizedRatingActionError,
    DuplicateRatingError,
)

logger = logging.getLogger(__name__)

NO_PERMISSION_TO_RATE = '로그인 한 후 평점을 남길 수 있습니다.'
NO_PERMISSION_TO_UPDATE = '해당 평점에 수정 권한이 없습니다.'

BOOK_PARAMETER = OpenApiParameter('book', OpenApiTypes.UUID, required=True, description='Book to list ratings for')


class RatingPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class RatingViewSet(viewsets.GenericViewSet):
    """
    Book ratings.

    list: Ratings of one book (``?book=`` required)
    summary: Count and average score of one book
    create: Rate a book as the session user
    partial_update: Change your own rating
    destroy: Remove your own rating
    """

    queryset = Rating.objects.all()
    serializer_class = RatingSerializer
    permission_classes = [AllowAny]
    pagination_class = RatingPagination

    @extend_schema(
        parameters=[BOOK_PARAMETER],
        responses={200: RatingSerializer(many=True), 400: ErrorResponseSerializer},
        tags=['ratings'],
    )
    def list(self, request):
        book_id = request.query_params.get('book')
        if not book_id:
            return Response(errors.invalid_query(), status=status.HTTP_400_BAD_REQUEST)

        queryset = get_book_ratings(book_id=book_id)
        page = self.paginate_queryset(queryset)
        return self.get_paginated_response(self.get_serializer(page, many=True).data)

    @extend_schema(
        parameters=[BOOK_PARAMETER],
        responses={200: RatingSummarySerializer, 400: ErrorResponseSerializer},
        tags=['ratings'],
    )
    @action(detail=False, methods=['get'])
    def summary(self, request):
        book_id = request.query_params.get('book')
        if not book_id:
            return Response(errors.invalid_query(), status=status.HTTP_400_BAD_REQUEST)

        return Response(RatingSummarySerializer(get_rating_summary(book_id=book_id)).data)

    @extend_schema(
        request=RatingCreateSerializer,
        responses={
            201: RatingSerializer,
            400: ErrorResponseSerializer,
            401: ErrorResponseSerializer,
            409: ErrorResponseSerializer,
        },
        tags=['ratings'],
    )
    def create(self, request):
        serializer = RatingCreateSerializer(data=request.data)
        if not serializer.is_valid():
            logger.debug("Rejected rating body: %s", serializer.errors)
            return Response(errors.invalid_body(), status=status.HTTP_400_BAD_REQUEST)

        viewer = session_user(request)
        if viewer is None:
            return Response(
                errors.unauthorized(NO_PERMISSION_TO_RATE),
                status=status.HTTP_401_UNAUTHORIZED
            )

        try:
            rating = post_rating(user=viewer, **serializer.validated_data)
        except DuplicateRatingError as e:
            return Response(errors.service_error(e), status=status.HTTP_409_CONFLICT)

        return Response(self.get_serializer(rating).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=RatingUpdateSerializer,
        responses={
            200: RatingSerializer,
            400: ErrorResponseSerializer,
            401: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['ratings'],
    )
    def partial_update(self, request, pk=None):
        serializer = RatingUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(errors.invalid_body(), status=status.HTTP_400_BAD_REQUEST)

        viewer = session_user(request)
        if viewer is None:
            return Response(
                errors.unauthorized(NO_PERMISSION_TO_UPDATE),
                status=status.HTTP_401_UNAUTHORIZED
            )

        try:
            rating = patch_rating(rating_id=pk, user=viewer, **serializer.validated_data)
        except RatingNotFoundError as e:
            return Response(errors.service_error(e), status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedRatingActionError as e:
            return Response(errors.service_error(e), status=status.HTTP_401_UNAUTHORIZED)

        return Response(self.get_serializer(rating).data)

    @extend_schema(
        responses={204: None, 401: ErrorResponseSerializer, 404: ErrorResponseSerializer},
        tags=['ratings'],
    )
    def destroy(self, request, pk=None):
        try:
            delete_rating(rating_id=pk, user=session_user(request))
        except RatingNotFoundError as e:
            return Response(errors.service_error(e), status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedRatingActionError as e:
            return Response(errors.service_error(e), status=status.HTTP_401_UNAUTHORIZED)

        return Response(status=status.HTTP_204_NO_CONTENT)
