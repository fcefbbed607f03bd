from rest_framework import viewsets
from rest_framework.permissions import AllowAny
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, extend_schema_view
from .models import Curation
from .serializers import CurationSerializer


class CurationPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


@extend_schema_view(
    list=extend_schema(tags=['curations']),
    retrieve=extend_schema(tags=['curations']),
)
class CurationViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only ViewSet for curations.

    list: Get all curations
    retrieve: Get a specific curation
    """

    queryset = Curation.objects.select_related('curator')
    serializer_class = CurationSerializer
    permission_classes = [AllowAny]
    pagination_class = CurationPagination
