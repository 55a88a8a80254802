"""
Request pipeline middleware: request state, Basic HTTP Authentication gate
and the JSON error handler
"""
import logging

from asgiref.sync import iscoroutinefunction, markcoroutinefunction
from django.conf import settings
from django.core.exceptions import BadRequest, PermissionDenied, SuspiciousOperation
from django.http import Http404, JsonResponse

from authentication import gate
from authentication.authenticators import load_authenticator
from authentication.errors import ServiceError, error_response
from authentication.state import RequestState, get_state

logger = logging.getLogger(__name__)

DJANGO_HANDLED_EXCEPTIONS = (Http404, PermissionDenied, SuspiciousOperation, BadRequest)


class RequestStateMiddleware:
    """
    Give every request a fresh, empty RequestState as request.state
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.state = RequestState()
        return self.get_response(request)


class BasicAuthMiddleware:
    """
    Basic HTTP Authentication gate.

    Requests without an Authorization header pass through unauthenticated.
    Otherwise the credentials are checked by the configured authenticator
    and the user's id is stored in request.state.user before the view runs.
    """
    async_capable = True
    sync_capable = False

    def __init__(self, get_response):
        self.get_response = get_response
        if iscoroutinefunction(self.get_response):
            markcoroutinefunction(self)

    async def __call__(self, request):
        # Only enable if BASIC_AUTH_ENABLED is True
        if not getattr(settings, 'BASIC_AUTH_ENABLED', True):
            return await self.get_response(request)

        header = request.META.get('HTTP_AUTHORIZATION')

        # Anonymous requests never need the authenticator
        if not header:
            return await self.get_response(request)

        decision = await gate.handle(
            header,
            load_authenticator(),
            timeout=getattr(settings, 'BASIC_AUTH_TIMEOUT', None),
            internal_fault_status=getattr(settings, 'BASIC_AUTH_INTERNAL_FAULT_STATUS', gate.DEFAULT_FAULT_STATUS),
        )

        if isinstance(decision, gate.Reject):
            return JsonResponse(decision.to_dict(), status=decision.status)

        if isinstance(decision, gate.Propagate):
            return error_response(decision.error)

        if isinstance(decision, gate.Continue):
            get_state(request).user = decision.identity

        return await self.get_response(request)


class ErrorHandlerMiddleware:
    """
    Answer exceptions raised by views with a JSON error body

    ServiceErrors keep their own status and code; anything else is logged
    and answered with a generic 500.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        # Left to Django, which answers these with 404, 403 and 400
        if isinstance(exception, DJANGO_HANDLED_EXCEPTIONS):
            return None

        if isinstance(exception, ServiceError):
            logger.warning(f"Service error on {request.path}: {exception!r}")
        else:
            logger.exception(f"Unhandled error on {request.path}")

        return error_response(exception)
