from django.db import DatabaseError
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from .decorators import authentication_required
from .error_codes import INTERNAL_SERVER_ERROR
from .models import Account
from .state import get_state
import logging

logger = logging.getLogger(__name__)


@require_GET
def health(request):
    """
    Service health check

    With ?heavy=true also runs a query against the database to check the
    service can still reach it.
    """
    if request.GET.get('heavy') != 'true':
        return JsonResponse({'message': 'This service is "running"'})

    try:
        Account.objects.exists()
    except DatabaseError as e:
        logger.error(f"Internal server error, a query failed: {str(e)}")
        return JsonResponse({
            'code': INTERNAL_SERVER_ERROR,
            'message': 'This service is not healthy'
        }, status=500)

    return JsonResponse({'message': 'This service is "running" and connected to the database'})


@require_GET
@authentication_required
def current_user(request):
    """Return the identity the authentication gate attached to the request"""
    return JsonResponse({'user': get_state(request).user})
