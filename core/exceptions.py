"""
Error taxonomy shared by every app.

    ValidationError    malformed input, surfaced as 400 and never retried automatically
    NotFoundError      unknown request or restaurant id, surfaced as 404
    InvalidStateError  transition attempted on a request that already left the
                       required state, surfaced as 409 together with the status
                       the request actually has
"""
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, ValidationError
from rest_framework.views import exception_handler

from core.utils import get_debug_str, get_logger

logger = get_logger()

__all__ = ['ValidationError', 'NotFoundError', 'InvalidStateError', 'api_exception_handler']


class NotFoundError(NotFound):
    default_detail = 'Not found.'
    default_code = 'not_found'


class InvalidStateError(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'The object is not in a state that allows this action.'
    default_code = 'invalid_state'

    def __init__(self, detail=None, current_status=None):
        self.current_status = current_status
        detail = detail or self.default_detail
        if current_status is not None:
            detail = {'detail': detail, 'current_status': current_status}
        super().__init__(detail=detail, code=self.default_code)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    request = context.get('request')
    if response is not None and request is not None:
        logger.warning(
            f"{exc.__class__.__name__} -> {response.status_code}"
            f"{get_debug_str(request, getattr(request, 'user', None), response.data)}"
        )
    return response
