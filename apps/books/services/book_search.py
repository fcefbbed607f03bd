"""Book search service."""

from django.db.models import Q, QuerySet
from typing import Optional

from ..models import Book


def search_books(*, search: Optional[str] = None) -> QuerySet[Book]:
    """
    Filter books by a search term.

    Args:
        search: Matched case-insensitively against title, authors and ISBN

    Returns:
        QuerySet of Book
    """
    queryset = Book.objects.all()

    if search:
        queryset = queryset.filter(
            Q(title__icontains=search) |
            Q(authors__icontains=search) |
            Q(isbn__icontains=search)
        )

    return queryset
