"""
Service layer tests for reviews app.

Tests all service functions for:
- Review queries (filters, search, visibility, like annotations)
- Review management (create, update, delete)
- Like management (like, unlike, duplicate protection)
"""

import pytest
from unittest import mock
from uuid import uuid4
from django.db.models import QuerySet

from apps.reviews.services import (
    get_reviews,
    search_reviews,
    get_review,
    post_review,
    patch_review,
    delete_review,
    post_like,
    delete_like,
)
from apps.reviews.services.exceptions import (
    ReviewNotFoundError,
    UnauthorizedReviewActionError,
    DuplicateLikeError,
    LikeNotFoundError,
)
from apps.reviews.services.review_management import parse_review_id
from apps.reviews.models import Review, Like


# ============================================================================
# REVIEW QUERY TESTS
# ============================================================================

@pytest.mark.django_db
class TestReviewQueries:
    """Test review listing, search and lookup."""

    def test_parse_review_id(self):
        value = uuid4()
        assert parse_review_id(value) == value
        assert parse_review_id(str(value)) == value
        assert parse_review_id('zzz') is None
        assert parse_review_id(None) is None

    def test_get_reviews_by_author(self, review, draft_review, other_review, review_user):
        reviews = get_reviews(filters={'author': review_user.id})

        assert list(reviews) == [review]

    def test_get_reviews_includes_viewer_drafts(self, review, draft_review, review_user):
        reviews = get_reviews(filters={'author': review_user.id}, viewer=review_user)

        assert set(reviews) == {review, draft_review}

    def test_get_reviews_combines_filters(self, review, other_review, review_user, another_book):
        reviews = get_reviews(filters={'author': review_user.id, 'book': another_book.id})

        assert list(reviews) == []

    def test_get_reviews_liked_by_user(self, review, other_review, like, review_other_user):
        reviews = get_reviews(filters={'user': review_other_user.id}, viewer=review_other_user)

        assert list(reviews) == [review]
        assert reviews[0].liked is True

    def test_get_reviews_malformed_filter(self, review):
        assert list(get_reviews(filters={'book': 'nope'})) == []

    def test_get_reviews_newest_first(self, review, other_review):
        reviews = get_reviews(filters={'list_type': 'recent'})

        assert list(reviews) == [other_review, review]

    def test_like_count_not_inflated_by_books(self, review, like, another_book, review_user):
        """Multiple books on a review do not multiply its like count."""
        review.books.add(another_book)
        Like.objects.create(review=review, user=review_user)

        reviews = get_reviews(filters={'author': review_user.id})

        assert reviews[0].like_count == 2

    def test_search_reviews(self, review, other_review, draft_review, review_user):
        assert list(search_reviews(query='grown-ups')) == [review]
        assert set(search_reviews(query='prince', viewer=review_user)) == {review, draft_review}
        assert list(search_reviews(query='nothing matches this')) == []

    def test_get_review_success(self, review, like):
        found = get_review(review_id=str(review.id))

        assert found == review
        assert found.like_count == 1
        assert found.liked is False

    def test_get_review_returns_drafts(self, draft_review):
        """Visibility is left to the caller."""
        assert get_review(review_id=draft_review.id) == draft_review

    @pytest.mark.parametrize('review_id', ['zzz', '', None])
    def test_get_review_malformed_id(self, review_id):
        with pytest.raises(ReviewNotFoundError):
            get_review(review_id=review_id)

    def test_get_review_not_found(self):
        with pytest.raises(ReviewNotFoundError) as exc_info:
            get_review(review_id=uuid4())

        assert exc_info.value.error_type == 'ReviewNotFound'


# ============================================================================
# REVIEW MANAGEMENT TESTS
# ============================================================================

@pytest.mark.django_db
class TestReviewManagement:
    """Test review create, update and delete."""

    def test_post_review_success(self, review_user, book, another_book):
        review = post_review(
            author=review_user,
            title='Two books',
            contents='Read side by side.',
            published=False,
            books=[book, another_book],
        )

        assert review.author == review_user
        assert review.published is False
        assert set(review.books.all()) == {book, another_book}
        assert review.like_count == 0

    def test_patch_review_success(self, review, review_user):
        updated = patch_review(
            review_id=review.id,
            author=review_user,
            title='New title',
            contents='New contents',
            published=False,
        )

        assert updated.title == 'New title'
        assert updated.published is False
        assert updated.author == review_user

    def test_patch_review_keeps_books_when_omitted(self, review, review_user, book):
        patch_review(
            review_id=review.id,
            author=review_user,
            title=review.title,
            contents=review.contents,
            published=True,
        )

        assert list(review.books.all()) == [book]

    def test_patch_review_unauthorized(self, review, review_other_user):
        with pytest.raises(UnauthorizedReviewActionError):
            patch_review(
                review_id=review.id,
                author=review_other_user,
                title='Hijacked',
                contents='Hijacked',
                published=False,
            )

        review.refresh_from_db()
        assert review.title == 'A book for grown-ups'

    def test_patch_review_anonymous(self, review):
        with pytest.raises(UnauthorizedReviewActionError):
            patch_review(review_id=review.id, author=None, title='t', contents='c', published=True)

    def test_patch_review_not_found(self, review_user):
        with pytest.raises(ReviewNotFoundError):
            patch_review(review_id=uuid4(), author=review_user, title='t', contents='c', published=True)

    def test_delete_review_success(self, review, review_user, like):
        delete_review(review_id=review.id, user=review_user)

        assert not Review.objects.filter(id=review.id).exists()
        assert not Like.objects.filter(id=like.id).exists()

    def test_delete_review_unauthorized(self, review, review_other_user):
        with pytest.raises(UnauthorizedReviewActionError):
            delete_review(review_id=review.id, user=review_other_user)

        assert Review.objects.filter(id=review.id).exists()

    def test_delete_review_not_found(self, review_user):
        with pytest.raises(ReviewNotFoundError):
            delete_review(review_id='zzz', user=review_user)


# ============================================================================
# LIKE MANAGEMENT TESTS
# ============================================================================

@pytest.mark.django_db
class TestLikeManagement:
    """Test liking and unliking reviews."""

    def test_post_like_success(self, review, review_other_user):
        like = post_like(review_id=review.id, user=review_other_user)

        assert like.review == review
        assert like.user == review_other_user

    def test_author_can_like_own_draft(self, draft_review, review_user):
        like = post_like(review_id=draft_review.id, user=review_user)

        assert like.review == draft_review

    def test_post_like_duplicate(self, review, like, review_other_user):
        with pytest.raises(DuplicateLikeError):
            post_like(review_id=review.id, user=review_other_user)

    def test_post_like_duplicate_caught_by_constraint(self, review, like, review_other_user):
        """A like that slips past the existence check still fails cleanly."""
        with mock.patch.object(QuerySet, 'exists', return_value=False):
            with pytest.raises(DuplicateLikeError):
                post_like(review_id=review.id, user=review_other_user)

        assert Like.objects.filter(review=review, user=review_other_user).count() == 1

    def test_post_like_others_draft(self, draft_review, review_other_user):
        with pytest.raises(ReviewNotFoundError):
            post_like(review_id=draft_review.id, user=review_other_user)

    def test_post_like_not_found(self, review_user):
        with pytest.raises(ReviewNotFoundError):
            post_like(review_id=uuid4(), user=review_user)

    def test_delete_like_success(self, review, like, review_other_user):
        delete_like(review_id=review.id, user=review_other_user)

        assert not Like.objects.filter(id=like.id).exists()

    def test_delete_like_not_liked(self, review, review_user):
        with pytest.raises(LikeNotFoundError):
            delete_like(review_id=review.id, user=review_user)

    def test_delete_like_review_not_found(self, review_user):
        with pytest.raises(ReviewNotFoundError):
            delete_like(review_id='zzz', user=review_user)
