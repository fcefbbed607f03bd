"""Books services - Business logic layer."""

from .book_search import search_books

__all__ = [
    'search_books',
]
