"""Review management service - queries and CRUD operations for reviews."""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Count, Exists, OuterRef, Q, QuerySet, Value, BooleanField
from uuid import UUID
from typing import Optional

from apps.accounts.models import User
from apps.books.models import Book
from apps.reviews.models import Review, Like
from .exceptions import (
    ReviewNotFoundError,
    UnauthorizedReviewActionError,
)

logger = logging.getLogger(__name__)

POPULAR_LIST_TYPE = 'popular'


def parse_review_id(value) -> Optional[UUID]:
    """Return the UUID for ``value``, or None when it is not a valid identifier."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        return None


def _visible_to(queryset: QuerySet[Review], viewer: Optional[User]) -> QuerySet[Review]:
    """Published reviews plus the viewer's own drafts."""
    if viewer is None:
        return queryset.filter(published=True)
    return queryset.filter(Q(published=True) | Q(author=viewer))


def _with_like_data(queryset: QuerySet[Review], viewer: Optional[User]) -> QuerySet[Review]:
    """Annotate ``like_count`` and whether ``viewer`` liked each review."""
    if viewer is None:
        liked = Value(False, output_field=BooleanField())
    else:
        liked = Exists(Like.objects.filter(review=OuterRef('pk'), user=viewer))

    return (
        queryset
        .select_related('author')
        .prefetch_related('books')
        .annotate(like_count=Count('likes', distinct=True), liked=liked)
    )


def get_reviews(*, filters: dict, viewer: Optional[User] = None) -> QuerySet[Review]:
    """
    List reviews matching every given filter.

    Args:
        filters: Any of
            - author: UUID of the review author
            - book: UUID of a book the review covers
            - curation: UUID of a curation that includes the review
            - user: UUID of a user who liked the review
            - list_type: 'popular' orders by like count, anything else by recency
        viewer: Session user, if any. Their drafts are included.

    Returns:
        QuerySet of Review annotated with like_count and liked
    """
    queryset = _visible_to(Review.objects.all(), viewer)

    lookups = {
        'author': lambda pk: Q(author_id=pk),
        'book': lambda pk: Q(id__in=Review.books.through.objects.filter(book_id=pk).values('review_id')),
        'curation': lambda pk: Q(id__in=Review.curations.through.objects.filter(curation_id=pk).values('review_id')),
        'user': lambda pk: Q(id__in=Like.objects.filter(user_id=pk).values('review_id')),
    }
    for key, lookup in lookups.items():
        value = filters.get(key)
        if not value:
            continue
        pk = parse_review_id(value)
        if pk is None:
            # Malformed identifiers cannot match anything
            return Review.objects.none()
        queryset = queryset.filter(lookup(pk))

    queryset = _with_like_data(queryset, viewer)

    if filters.get('list_type') == POPULAR_LIST_TYPE:
        return queryset.order_by('-like_count', '-created_at')
    return queryset.order_by('-created_at')


def search_reviews(*, query: str, viewer: Optional[User] = None) -> QuerySet[Review]:
    """
    Case-insensitive search over review title, contents and reviewed book titles.

    Args:
        query: Search term
        viewer: Session user, if any

    Returns:
        QuerySet of matching Review, newest first
    """
    matching_books = Book.objects.filter(title__icontains=query).values('id')
    queryset = _visible_to(Review.objects.all(), viewer).filter(
        Q(title__icontains=query) |
        Q(contents__icontains=query) |
        Q(id__in=Review.books.through.objects.filter(book_id__in=matching_books).values('review_id'))
    )
    return _with_like_data(queryset, viewer).order_by('-created_at')


def get_review(*, review_id, viewer: Optional[User] = None) -> Review:
    """
    Retrieve a review by ID.

    Visibility is not checked here; callers decide what to do with drafts.

    Args:
        review_id: UUID (or its string form) of the review
        viewer: Session user, used for the ``liked`` annotation

    Returns:
        Review instance annotated with like data

    Raises:
        ReviewNotFoundError: If the id is malformed or no such review exists
    """
    pk = parse_review_id(review_id)
    if pk is None:
        raise ReviewNotFoundError("Review not found")

    try:
        return _with_like_data(Review.objects.all(), viewer).get(id=pk)
    except (Review.DoesNotExist, ValidationError):
        raise ReviewNotFoundError("Review not found")


@transaction.atomic
def post_review(
    *,
    author: User,
    title: str,
    contents: str,
    published: bool,
    books: list[Book],
) -> Review:
    """
    Create a new review.

    Args:
        author: Session user; always the owner of the new review
        title: Review title
        contents: Review body
        published: False keeps the review as a draft visible only to its author
        books: Non-empty list of reviewed books

    Returns:
        Created Review instance
    """
    review = Review.objects.create(
        author=author,
        title=title,
        contents=contents,
        published=published,
    )
    review.books.set(books)

    logger.info("Review %s created by %s", review.id, author.id)
    return get_review(review_id=review.id, viewer=author)


@transaction.atomic
def patch_review(
    *,
    review_id,
    author: Optional[User],
    title: str,
    contents: str,
    published: bool,
    books: Optional[list[Book]] = None,
) -> Review:
    """
    Update an existing review.

    Only the review author can update their review. The author itself never
    changes.

    Args:
        review_id: UUID of review to update
        author: Session user making the update (must be the author)
        title: New title
        contents: New contents
        published: New publication state
        books: New list of books, or None to keep the current ones

    Returns:
        Updated Review instance

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
    """
    review = _lock_review(review_id)

    if author is None or review.author_id != author.pk:
        raise UnauthorizedReviewActionError("You can only update your own reviews")

    review.title = title
    review.contents = contents
    review.published = published
    review.save(update_fields=['title', 'contents', 'published', 'updated_at'])

    if books is not None:
        review.books.set(books)

    logger.info("Review %s updated by %s", review.id, author.id)
    return get_review(review_id=review.id, viewer=author)


@transaction.atomic
def delete_review(*, review_id, user: Optional[User]) -> None:
    """
    Delete a review and its likes.

    Only the review author can delete their review.

    Args:
        review_id: UUID of review to delete
        user: Session user making the deletion (must be the author)

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
    """
    review = _lock_review(review_id)

    if user is None or review.author_id != user.pk:
        raise UnauthorizedReviewActionError("You can only delete your own reviews")

    review.delete()
    logger.info("Review %s deleted by %s", review_id, user.id)


def _lock_review(review_id) -> Review:
    """Fetch a review with a row lock. Must run inside a transaction."""
    pk = parse_review_id(review_id)
    if pk is None:
        raise ReviewNotFoundError("Review not found")

    try:
        return (
            Review.objects
            .select_for_update()
            .get(id=pk)
        )
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")
