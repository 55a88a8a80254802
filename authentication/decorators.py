import logging
from functools import wraps

from django.http import JsonResponse

from .error_codes import AuthenticationErrorCode
from .state import get_state

logger = logging.getLogger(__name__)


def authentication_required(view_func):
    """
    Refuse requests that no authentication gate has identified

    The gates let requests without credentials through; views that need a
    user are wrapped with this.
    """
    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        state = get_state(request)
        if not state.is_authenticated:
            logger.debug(f"Unauthenticated request to {request.path}: {state!r}")
            return JsonResponse({
                'code': str(AuthenticationErrorCode.UNAUTHORIZED_EXCEPTION),
                'message': 'You are not authenticated'
            }, status=401)

        return view_func(request, *args, **kwargs)

    return _wrapped_view
