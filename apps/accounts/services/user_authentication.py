"""Credential checks performed before a session is started."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Check a reader's email and password ahead of a session login.

    Email matching ignores case. The row is locked while ``last_login`` is
    stamped so two logins for the same reader do not interleave.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: Account was deactivated
    """
    user = (
        User.objects
        .select_for_update()
        .filter(email__iexact=email)
        .first()
    )

    if user is None or not user.check_password(password):
        logger.info("Rejected login for %s", email)
        raise InvalidCredentialsError(INVALID_CREDENTIALS)

    if not user.is_active:
        logger.info("Rejected login for deactivated user %s", user.id)
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    logger.info("User %s authenticated", user.id)
    return user
