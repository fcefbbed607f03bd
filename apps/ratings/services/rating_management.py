"""Rating management service - per-book scores given by readers."""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction, IntegrityError
from django.db.models import Avg, Count, QuerySet
from typing import Optional

from apps.accounts.models import User
from apps.books.models import Book
from apps.ratings.models import Rating, MIN_SCORE, MAX_SCORE
from .exceptions import (
    RatingNotFoundError,
    UnauthorizedRatingActionError,
    DuplicateRatingError,
    InvalidScoreError,
)

logger = logging.getLogger(__name__)


def _check_score(score: int) -> None:
    if isinstance(score, bool) or not isinstance(score, int) or not MIN_SCORE <= score <= MAX_SCORE:
        raise InvalidScoreError(f"Score must be an integer from {MIN_SCORE} to {MAX_SCORE}")


def get_book_ratings(*, book_id) -> QuerySet[Rating]:
    """
    Ratings given to a book, newest first.

    A malformed book id matches nothing.
    """
    try:
        queryset = Rating.objects.filter(book_id=book_id)
    except ValidationError:
        return Rating.objects.none()
    return queryset.select_related('user').order_by('-created_at')


def get_rating_summary(*, book_id) -> dict:
    """Return ``{'count': int, 'average': float | None}`` for a book."""
    summary = get_book_ratings(book_id=book_id).aggregate(count=Count('id'), average=Avg('score'))
    if summary['average'] is not None:
        summary['average'] = round(summary['average'], 2)
    return summary


def post_rating(*, book: Book, user: User, score: int) -> Rating:
    """
    Rate a book.

    Raises:
        InvalidScoreError: Score outside 1..5
        DuplicateRatingError: User already rated the book
    """
    _check_score(score)

    if Rating.objects.filter(book=book, user=user).exists():
        raise DuplicateRatingError("You have already rated this book")

    try:
        with transaction.atomic():
            rating = Rating.objects.create(book=book, user=user, score=score)
    except IntegrityError:
        raise DuplicateRatingError("You have already rated this book")

    logger.info("User %s rated book %s with %s", user.id, book.id, score)
    return rating


@transaction.atomic
def patch_rating(*, rating_id, user: Optional[User], score: int) -> Rating:
    """
    Change the score of a rating. Only the user who gave it may do so.

    Raises:
        InvalidScoreError: Score outside 1..5
        RatingNotFoundError: No such rating
        UnauthorizedRatingActionError: User did not give the rating
    """
    _check_score(score)
    rating = _lock_rating(rating_id)

    if user is None or rating.user_id != user.pk:
        raise UnauthorizedRatingActionError("You can only update your own ratings")

    rating.score = score
    rating.save(update_fields=['score', 'updated_at'])

    logger.info("Rating %s updated by %s", rating.id, user.id)
    return rating


@transaction.atomic
def delete_rating(*, rating_id, user: Optional[User]) -> None:
    """
    Remove a rating. Only the user who gave it may do so.

    Raises:
        RatingNotFoundError: No such rating
        UnauthorizedRatingActionError: User did not give the rating
    """
    rating = _lock_rating(rating_id)

    if user is None or rating.user_id != user.pk:
        raise UnauthorizedRatingActionError("You can only delete your own ratings")

    rating.delete()
    logger.info("Rating %s deleted by %s", rating_id, user.id)


def _lock_rating(rating_id) -> Rating:
    try:
        return Rating.objects.select_for_update().get(id=rating_id)
    except (Rating.DoesNotExist, ValidationError):
        raise RatingNotFoundError("Rating not found")
