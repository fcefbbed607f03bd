"""Domain exceptions for reviews app."""


class ReviewsServiceError(Exception):
    """
    Base exception for all reviews service errors.

    Each subclass carries an ``error_type`` discriminator that ends up in the
    error payload returned to the client.
    """
    error_type = 'ReviewsServiceError'


class ReviewNotFoundError(ReviewsServiceError):
    """Review does not exist, was deleted, or the id is malformed."""
    error_type = 'ReviewNotFound'


class UnauthorizedReviewActionError(ReviewsServiceError):
    """Acting user is not the author of the review."""
    error_type = 'Unauthorized'


class DuplicateLikeError(ReviewsServiceError):
    """User already liked this review."""
    error_type = 'DuplicateLike'


class LikeNotFoundError(ReviewsServiceError):
    """User never liked this review."""
    error_type = 'LikeNotFound'
