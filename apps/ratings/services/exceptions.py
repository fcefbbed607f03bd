"""Domain exceptions for ratings app."""


class RatingsServiceError(Exception):
    """Base exception for ratings services. ``error_type`` ends up in the payload."""
    error_type = 'RatingsServiceError'


class RatingNotFoundError(RatingsServiceError):
    error_type = 'RatingNotFound'


class UnauthorizedRatingActionError(RatingsServiceError):
    """Acting user did not give this rating."""
    error_type = 'Unauthorized'


class DuplicateRatingError(RatingsServiceError):
    """User already rated this book."""
    error_type = 'DuplicateRating'


class InvalidScoreError(RatingsServiceError):
    error_type = 'InvalidBody'
