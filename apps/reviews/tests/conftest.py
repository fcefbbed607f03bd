import pytest
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.books.models import Book
from apps.curations.models import Curation
from apps.reviews.models import Review, Like


REVIEW_PASSWORD = 'TestPass123!'


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def review_user(db):
    """Create and return a test user for reviews."""
    return User.objects.create_user(
        email='reviewer@example.com',
        password=REVIEW_PASSWORD,
        display_name='Book Reviewer',
    )


@pytest.fixture
def review_other_user(db):
    """Create and return another test user for reviews."""
    return User.objects.create_user(
        email='review_other@example.com',
        password=REVIEW_PASSWORD,
        display_name='Review Other User',
    )


@pytest.fixture
def review_auth_client(review_user):
    """Return API client authenticated as review user."""
    client = APIClient()
    client.force_authenticate(user=review_user)
    return client


@pytest.fixture
def review_other_client(review_other_user):
    """Return API client authenticated as other user."""
    client = APIClient()
    client.force_authenticate(user=review_other_user)
    return client


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


@pytest.fixture
def review(db, review_user, book):
    """Create and return a published review."""
    review = Review.objects.create(
        author=review_user,
        title='A book for grown-ups',
        contents='Read it again as an adult and found new meaning.',
        published=True,
    )
    review.books.add(book)
    return review


@pytest.fixture
def draft_review(db, review_user, book):
    """Create and return an unpublished review."""
    review = Review.objects.create(
        author=review_user,
        title='Draft notes',
        contents='Still thinking about the fox.',
        published=False,
    )
    review.books.add(book)
    return review


@pytest.fixture
def other_review(db, review_other_user, another_book):
    """Create a published review by another user."""
    review = Review.objects.create(
        author=review_other_user,
        title='Breaking the shell',
        contents='Sinclair and the bird fighting out of the egg.',
        published=True,
    )
    review.books.add(another_book)
    return review


@pytest.fixture
def curation(db, review_other_user, review):
    """Create a curation that collects the published review."""
    curation = Curation.objects.create(
        title='Books to reread',
        contents='Reviews that changed on a second reading.',
        curator=review_other_user,
    )
    curation.reviews.add(review)
    return curation


@pytest.fixture
def like(db, review_other_user, review):
    """Other user likes the published review."""
    return Like.objects.create(review=review, user=review_other_user)
