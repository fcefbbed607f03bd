from rest_framework import viewsets
from rest_framework.permissions import AllowAny
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Book
from .serializers import BookSerializer
from .services import search_books


class BookPagination(PageNumberPagination):
    """Custom pagination for books."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


@extend_schema_view(
    list=extend_schema(
        parameters=[
            OpenApiParameter('search', OpenApiTypes.STR, description='Search in title, authors or ISBN'),
        ],
        tags=['books'],
    ),
    retrieve=extend_schema(tags=['books']),
)
class BookViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only ViewSet for books.

    list: Get all books (optionally filtered by search)
    retrieve: Get a specific book
    """

    queryset = Book.objects.all()
    serializer_class = BookSerializer
    permission_classes = [AllowAny]
    pagination_class = BookPagination

    def get_queryset(self):
        return search_books(search=self.request.query_params.get('search'))
