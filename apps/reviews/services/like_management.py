"""Like management service - users liking and unliking reviews."""

import logging

from django.db import transaction, IntegrityError

from apps.accounts.models import User
from apps.reviews.models import Review, Like
from .exceptions import (
    ReviewNotFoundError,
    DuplicateLikeError,
    LikeNotFoundError,
)
from .review_management import parse_review_id

logger = logging.getLogger(__name__)


def _get_review(review_id) -> Review:
    pk = parse_review_id(review_id)
    if pk is None:
        raise ReviewNotFoundError("Review not found")

    try:
        return Review.objects.get(id=pk)
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")


def post_like(*, review_id, user: User) -> Like:
    """
    Like a review.

    Args:
        review_id: UUID of the review
        user: Session user

    Returns:
        Created Like instance

    Raises:
        ReviewNotFoundError: If the review doesn't exist or is someone else's draft
        DuplicateLikeError: If the user already liked the review
    """
    review = _get_review(review_id)
    if not review.is_visible_to(user):
        raise ReviewNotFoundError("Review not found")

    if Like.objects.filter(review=review, user=user).exists():
        raise DuplicateLikeError("You have already liked this review")

    try:
        with transaction.atomic():
            like = Like.objects.create(review=review, user=user)
    except IntegrityError:
        # Database unique constraint caught a concurrent duplicate
        raise DuplicateLikeError("You have already liked this review")

    logger.info("User %s liked review %s", user.id, review.id)
    return like


@transaction.atomic
def delete_like(*, review_id, user: User) -> None:
    """
    Remove a like.

    Args:
        review_id: UUID of the review
        user: Session user

    Raises:
        ReviewNotFoundError: If the review doesn't exist
        LikeNotFoundError: If the user never liked the review
    """
    review = _get_review(review_id)

    deleted, _ = Like.objects.filter(review=review, user=user).delete()
    if not deleted:
        raise LikeNotFoundError("You have not liked this review")

    logger.info("User %s unliked review %s", user.id, review.id)
