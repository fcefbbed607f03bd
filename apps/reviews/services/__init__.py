"""
Reviews services - Business logic layer.

This package contains all business operations for the reviews app:
- Review queries (filtered listing, search, single lookup)
- Review CRUD operations
- Likes
"""

from .review_management import (
    get_reviews,
    search_reviews,
    get_review,
    post_review,
    patch_review,
    delete_review,
)

from .like_management import (
    post_like,
    delete_like,
)

# Domain Exceptions
from .exceptions import (
    ReviewsServiceError,
    ReviewNotFoundError,
    UnauthorizedReviewActionError,
    DuplicateLikeError,
    LikeNotFoundError,
)

__all__ = [
    # Review Management Services
    'get_reviews',
    'search_reviews',
    'get_review',
    'post_review',
    'patch_review',
    'delete_review',
    # Like Services
    'post_like',
    'delete_like',
    # Exceptions
    'ReviewsServiceError',
    'ReviewNotFoundError',
    'UnauthorizedReviewActionError',
    'DuplicateLikeError',
    'LikeNotFoundError',
]
