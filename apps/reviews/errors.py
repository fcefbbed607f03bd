"""
Structured error payloads returned by the review API.

Every error body has the shape::

    {"error": {"type": "<discriminator>", "message": "<human readable>"}}
"""


def _payload(error_type: str, message: str) -> dict:
    return {'error': {'type': error_type, 'message': message}}


def invalid_body() -> dict:
    """Request body is missing a field or has a field of the wrong type."""
    return _payload('InvalidBody', '요청 본문의 형식이 올바르지 않습니다.')


def invalid_query() -> dict:
    """Query string is missing a required parameter."""
    return _payload('InvalidQuery', '요청 쿼리의 형식이 올바르지 않습니다.')


def unauthorized(reason: str) -> dict:
    return _payload('Unauthorized', reason)


def not_found(error_type: str, reason: str) -> dict:
    return _payload(error_type, reason)


def internal_error() -> dict:
    return _payload('InternalError', '서버에서 오류가 발생했습니다.')


def service_error(exc) -> dict:
    """Payload for a domain error raised by the review service layer."""
    return _payload(exc.error_type, str(exc))


def api_error(error_type: str, message: str, fields=None) -> dict:
    """Payload for errors raised by the framework itself (405, bad page, CSRF...)."""
    payload = _payload(error_type, message)
    if fields:
        payload['error']['fields'] = fields
    return payload
