"""
Service errors and the JSON error channel

Anything that wants to end a request with a structured error raises (or
returns) a ServiceError; error_response() is the one place that renders it.
"""
from django.http import JsonResponse

from .error_codes import INTERNAL_SERVER_ERROR

DEFAULT_ERROR_STATUS = 500
GENERIC_ERROR_MESSAGE = 'Something seems to be wrong, this incident has been acknowledged'


class ServiceError(Exception):
    """
    Error carrying an error code, a user-facing message and, optionally,
    the HTTP status it should be answered with
    """

    def __init__(self, error_code, message, http_code=None):
        super().__init__(message)
        self.error_code = error_code
        self.message = message
        self.http_code = http_code

    def to_dict(self):
        return {
            'code': str(self.error_code),
            'message': self.message,
        }

    def __repr__(self):
        return f"{type(self).__name__}({str(self.error_code)!r}, {self.message!r}, http_code={self.http_code!r})"


class AuthenticationFault(ServiceError):
    """Structured failure raised by an authenticator"""


def error_response(error):
    """
    Render an error for the client

    ServiceErrors are answered with their own status (500 when unset) and
    body. Anything else gets the generic internal error body.
    """
    if isinstance(error, ServiceError):
        status = error.http_code or DEFAULT_ERROR_STATUS
        return JsonResponse(error.to_dict(), status=status)

    return JsonResponse({
        'code': INTERNAL_SERVER_ERROR,
        'message': GENERIC_ERROR_MESSAGE,
    }, status=DEFAULT_ERROR_STATUS)
