import pytest
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.books.models import Book
from apps.ratings.models import Rating


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def rater(db):
    """Create and return a reader who rates books."""
    return User.objects.create_user(
        email='rater@example.com',
        password='TestPass123!',
        display_name='Rater',
    )


@pytest.fixture
def other_rater(db):
    """Create and return a second reader."""
    return User.objects.create_user(
        email='other_rater@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def rater_client(rater):
    """Return API client authenticated as the rater."""
    client = APIClient()
    client.force_authenticate(user=rater)
    return client


@pytest.fixture
def other_rater_client(other_rater):
    """Return API client authenticated as the second reader."""
    client = APIClient()
    client.force_authenticate(user=other_rater)
    return client


@pytest.fixture
def rated_book(db):
    """Create and return a book to rate."""
    return Book.objects.create(title='Siddhartha', authors='Hermann Hesse', isbn='9780553208849')


@pytest.fixture
def rating(rater, rated_book):
    """The rater gave the book four points."""
    return Rating.objects.create(book=rated_book, user=rater, score=4)
