import pytest
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.curations.models import Curation
from apps.reviews.models import Review


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def curator(db):
    """Create and return a curator."""
    return User.objects.create_user(
        email='curator@example.com',
        password='TestPass123!',
        display_name='Curator',
    )


@pytest.fixture
def curated_review(curator):
    """Create and return a published review."""
    return Review.objects.create(
        author=curator,
        title='Worth rereading',
        contents='Better the second time.',
        published=True,
    )


@pytest.fixture
def curation(curator, curated_review):
    """Create a curation containing one review."""
    curation = Curation.objects.create(
        title='Autumn picks',
        contents='Short books for long evenings.',
        curator=curator,
    )
    curation.reviews.add(curated_review)
    return curation


@pytest.fixture
def curated_draft(curator, curation):
    """Add the curator's unpublished review to the curation."""
    draft = Review.objects.create(
        author=curator,
        title='Half-written',
        contents='Notes for later.',
        published=False,
    )
    curation.reviews.add(draft)
    return draft
