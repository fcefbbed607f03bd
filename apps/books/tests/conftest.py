import pytest
from rest_framework.test import APIClient
from apps.books.models import Book


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def book(db):
    """Create and return a test book."""
    return Book.objects.create(
        title='The Little Prince',
        authors='Antoine de Saint-Exupery',
        publisher='Reynal & Hitchcock',
        isbn='9780156012195',
    )


@pytest.fixture
def another_book(db):
    """Create and return another test book."""
    return Book.objects.create(
        title='Demian',
        authors='Hermann Hesse',
        isbn='9780060931919',
    )
