"""Project-wide DRF exception handler."""

import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.reviews import errors

logger = logging.getLogger(__name__)

# DRF exception class name -> error type exposed to clients
ERROR_TYPES = {
    'ParseError': 'InvalidBody',
    'ValidationError': 'InvalidBody',
    'UnsupportedMediaType': 'InvalidBody',
    'NotAuthenticated': 'Unauthorized',
    'AuthenticationFailed': 'Unauthorized',
}


def api_exception_handler(exc, context):
    """
    Wrap DRF's default handler so every error body has the same shape.

    - Malformed JSON bodies and failed validation become InvalidBody (400).
    - Other framework errors (405, invalid page, CSRF rejection) keep their
      status and are reported under their exception name.
    - Anything DRF does not know how to render becomes InternalError (500)
      instead of propagating out of the view.
    """
    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)
    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s",
            view.__class__.__name__ if view is not None else 'unknown view',
        )
        return Response(errors.internal_error(), status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    error_type = ERROR_TYPES.get(exc.__class__.__name__, exc.__class__.__name__)
    if error_type == 'InvalidBody':
        message = errors.invalid_body()['error']['message']
        fields = response.data if isinstance(exc, exceptions.ValidationError) else None
    else:
        message = str(exc.detail)
        fields = None

    response.data = errors.api_error(error_type, message, fields)
    return response
