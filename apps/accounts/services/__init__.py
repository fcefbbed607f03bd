"""
Accounts services.

Registration and credential checks behind the session endpoints. Starting
and ending the session itself is left to ``django.contrib.auth`` in the
views.
"""

from .user_registration import register_user
from .user_authentication import authenticate_user

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
)

__all__ = [
    'register_user',
    'authenticate_user',
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
]
