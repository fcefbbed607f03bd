"""Ratings services - readers scoring books."""

from .rating_management import (
    get_book_ratings,
    get_rating_summary,
    post_rating,
    patch_rating,
    delete_rating,
)

from .exceptions import (
    RatingsServiceError,
    RatingNotFoundError,
    UnauthorizedRatingActionError,
    DuplicateRatingError,
    InvalidScoreError,
)

__all__ = [
    'get_book_ratings',
    'get_rating_summary',
    'post_rating',
    'patch_rating',
    'delete_rating',
    'RatingsServiceError',
    'RatingNotFoundError',
    'UnauthorizedRatingActionError',
    'DuplicateRatingError',
    'InvalidScoreError',
]
