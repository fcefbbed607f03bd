"""Domain exceptions for accounts app."""


class AccountsServiceError(Exception):
    """
    Base exception for account and session errors.

    ``error_type`` is the discriminator placed in the error payload.
    """
    error_type = 'AccountsServiceError'


class UserRegistrationError(AccountsServiceError):
    """Email already belongs to another reader."""
    error_type = 'RegistrationFailed'


class InvalidCredentialsError(AccountsServiceError):
    """Unknown email or wrong password."""
    error_type = 'Unauthorized'


class InactiveAccountError(AccountsServiceError):
    """Credentials are right but the account was deactivated."""
    error_type = 'InactiveAccount'
