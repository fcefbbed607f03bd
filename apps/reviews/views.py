import logging

from django.conf import settings
from rest_framework import status, viewsets, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from . import errors
from .models import Review
from .serializers import (
    ReviewSerializer,
    ReviewCreateSerializer,
    ReviewUpdateSerializer,
    LikeSerializer,
)
from .services import (
    get_reviews,
    search_reviews,
    get_review,
    post_review,
    patch_review,
    delete_review,
    post_like,
    delete_like,
    ReviewNotFoundError,
    UnauthorizedReviewActionError,
    DuplicateLikeError,
    LikeNotFoundError,
)

logger = logging.getLogger(__name__)

REVIEW_FILTER_KEYS = ('author', 'list_type', 'book', 'curation')
MY_LIKES = 'my_likes'

MY_LIKES_LOGIN_REQUIRED = '인증을 한 후에 내가 좋아한 서평을 가져올 수 있습니다.'
NO_ACCESS_TO_REVIEW = '해당 서평에 접근 권한이 없습니다.'
REVIEW_NOT_FOUND = '해당 서평에 대한 정보를 찾을 수가 없습니다.'
NO_PERMISSION_TO_CREATE = '서평을 생성할 수 있는 권한이 없습니다.'
NO_PERMISSION_TO_UPDATE = '해당 서평에 수정 권한이 없습니다.'
LIKE_LOGIN_REQUIRED = '로그인 한 후 좋아요를 누를 수 있습니다.'
LIKED_REVIEW_NOT_FOUND = '해당 서평에 대한 정보를 찾지 못했습니다.'
UNLIKE_NOT_ALLOWED = '해당 좋아요를 취소할 수 없습니다.'


class ErrorDetailSerializer(drf_serializers.Serializer):
    type = drf_serializers.CharField()
    message = drf_serializers.CharField()


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = ErrorDetailSerializer()


class ReviewPagination(PageNumberPagination):
    """Custom pagination for reviews."""
    page_size = settings.REVIEWS_PAGE_SIZE
    page_size_query_param = 'page_size'
    max_page_size = 100


def session_user(request):
    """The authenticated session user, or None for anonymous requests."""
    user = request.user
    return user if user is not None and user.is_authenticated else None


class ReviewViewSet(viewsets.GenericViewSet):
    """
    Review endpoints.

    Every handler validates the request shape first, then checks the session,
    then delegates to the service layer and maps domain errors to responses:

    list: Filtered reviews (needs at least one filter)
    search: Search over reviews
    retrieve: A single review (drafts only for their author)
    create: Create a review as the session user
    partial_update: Update a review (author only)
    destroy: Delete a review (author only)
    like / unlike: Add or remove the session user's like
    """

    queryset = Review.objects.all()
    serializer_class = ReviewSerializer
    permission_classes = [AllowAny]
    pagination_class = ReviewPagination

    def _paginated(self, queryset):
        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = self.get_serializer(page, many=True)
            return self.get_paginated_response(serializer.data)

        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)

    @extend_schema(
        parameters=[
            OpenApiParameter('author', OpenApiTypes.UUID, description='Reviews written by this user'),
            OpenApiParameter('list_type', OpenApiTypes.STR, description="'my_likes' (login required) or 'popular'"),
            OpenApiParameter('book', OpenApiTypes.UUID, description='Reviews of this book'),
            OpenApiParameter('curation', OpenApiTypes.UUID, description='Reviews in this curation'),
        ],
        responses={
            200: ReviewSerializer(many=True),
            400: ErrorResponseSerializer,
            401: ErrorResponseSerializer,
        },
        description="List reviews. At least one filter is required.",
        tags=['reviews'],
    )
    def list(self, request):
        params = request.query_params
        if not any(params.get(key) for key in REVIEW_FILTER_KEYS):
            return Response(errors.invalid_query(), status=status.HTTP_400_BAD_REQUEST)

        viewer = session_user(request)
        filters = {key: params.get(key) for key in REVIEW_FILTER_KEYS if params.get(key)}

        if filters.get('list_type') == MY_LIKES:
            if viewer is None:
                return Response(
                    errors.unauthorized(MY_LIKES_LOGIN_REQUIRED),
                    status=status.HTTP_401_UNAUTHORIZED
                )
            filters['user'] = viewer.pk

        return self._paginated(get_reviews(filters=filters, viewer=viewer))

    @extend_schema(
        parameters=[
            OpenApiParameter('query', OpenApiTypes.STR, required=True, description='Search term'),
        ],
        responses={
            200: ReviewSerializer(many=True),
            400: ErrorResponseSerializer,
        },
        description="Search reviews by title, contents or book title.",
        tags=['reviews'],
    )
    @action(detail=False, methods=['get'])
    def search(self, request):
        query = request.query_params.get('query')
        if not query:
            return Response(errors.invalid_query(), status=status.HTTP_400_BAD_REQUEST)

        return self._paginated(search_reviews(query=query, viewer=session_user(request)))

    @extend_schema(
        responses={
            200: ReviewSerializer,
            401: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        description="Get a review. Unpublished reviews are visible to their author only.",
        tags=['reviews'],
    )
    def retrieve(self, request, pk=None):
        viewer = session_user(request)

        try:
            review = get_review(review_id=pk, viewer=viewer)
        except ReviewNotFoundError:
            return Response(
                errors.not_found('ReviewNotFound', REVIEW_NOT_FOUND),
                status=status.HTTP_404_NOT_FOUND
            )

        if not review.is_visible_to(viewer):
            return Response(
                errors.unauthorized(NO_ACCESS_TO_REVIEW),
                status=status.HTTP_401_UNAUTHORIZED
            )

        return Response(self.get_serializer(review).data)

    @extend_schema(
        request=ReviewCreateSerializer,
        responses={
            201: ReviewSerializer,
            400: ErrorResponseSerializer,
            401: ErrorResponseSerializer,
        },
        description="Create a review. The author is always the session user.",
        tags=['reviews'],
    )
    def create(self, request):
        serializer = ReviewCreateSerializer(data=request.data)
        if not serializer.is_valid():
            logger.debug("Rejected review body: %s", serializer.errors)
            return Response(errors.invalid_body(), status=status.HTTP_400_BAD_REQUEST)

        viewer = session_user(request)
        if viewer is None:
            return Response(
                errors.unauthorized(NO_PERMISSION_TO_CREATE),
                status=status.HTTP_401_UNAUTHORIZED
            )

        review = post_review(author=viewer, **serializer.validated_data)
        return Response(self.get_serializer(review).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=ReviewUpdateSerializer,
        responses={
            200: ReviewSerializer,
            400: ErrorResponseSerializer,
            401: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        description="Update a review. Only its author may do so.",
        tags=['reviews'],
    )
    def partial_update(self, request, pk=None):
        serializer = ReviewUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            logger.debug("Rejected review body: %s", serializer.errors)
            return Response(errors.invalid_body(), status=status.HTTP_400_BAD_REQUEST)

        viewer = session_user(request)
        if viewer is None:
            return Response(
                errors.unauthorized(NO_PERMISSION_TO_UPDATE),
                status=status.HTTP_401_UNAUTHORIZED
            )

        try:
            review = patch_review(review_id=pk, author=viewer, **serializer.validated_data)
        except ReviewNotFoundError as e:
            return Response(errors.service_error(e), status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedReviewActionError as e:
            return Response(errors.service_error(e), status=status.HTTP_401_UNAUTHORIZED)

        return Response(self.get_serializer(review).data)

    @extend_schema(
        responses={
            204: None,
            401: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        description="Delete a review. Only its author may do so.",
        tags=['reviews'],
    )
    def destroy(self, request, pk=None):
        try:
            delete_review(review_id=pk, user=session_user(request))
        except ReviewNotFoundError as e:
            return Response(errors.service_error(e), status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedReviewActionError as e:
            return Response(errors.service_error(e), status=status.HTTP_401_UNAUTHORIZED)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        request=None,
        responses={
            201: LikeSerializer,
            401: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
            409: ErrorResponseSerializer,
        },
        description="Like a review as the session user.",
        tags=['reviews'],
    )
    @action(detail=True, methods=['post'], url_path='likes', url_name='likes')
    def like(self, request, pk=None):
        viewer = session_user(request)
        if viewer is None:
            return Response(
                errors.unauthorized(LIKE_LOGIN_REQUIRED),
                status=status.HTTP_401_UNAUTHORIZED
            )

        try:
            like = post_like(review_id=pk, user=viewer)
        except ReviewNotFoundError:
            return Response(
                errors.not_found('ReviewNotFound', LIKED_REVIEW_NOT_FOUND),
                status=status.HTTP_404_NOT_FOUND
            )
        except DuplicateLikeError as e:
            return Response(errors.service_error(e), status=status.HTTP_409_CONFLICT)

        data = LikeSerializer({'user': viewer.pk, 'review': like.review_id}).data
        return Response(data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=None,
        responses={
            204: None,
            401: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        description="Remove the session user's like from a review.",
        tags=['reviews'],
    )
    @like.mapping.delete
    def unlike(self, request, pk=None):
        viewer = session_user(request)
        if viewer is None:
            return Response(
                errors.unauthorized(UNLIKE_NOT_ALLOWED),
                status=status.HTTP_401_UNAUTHORIZED
            )

        try:
            delete_like(review_id=pk, user=viewer)
        except ReviewNotFoundError:
            return Response(
                errors.not_found('ReviewNotFound', LIKED_REVIEW_NOT_FOUND),
                status=status.HTTP_404_NOT_FOUND
            )
        except LikeNotFoundError as e:
            return Response(errors.service_error(e), status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)
