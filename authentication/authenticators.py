"""
Authenticators resolve basic authentication credentials to a User

The gate only needs an object with ``async authenticate(identifier, secret)``
that returns a User or raises AuthenticationFault. Anything else it raises
is treated as an internal error.
"""
import logging
from dataclasses import dataclass
from typing import Protocol

from asgiref.sync import sync_to_async
from django.conf import settings
from django.contrib.auth import get_user_model
from django.utils.module_loading import import_string

from .error_codes import AuthenticationErrorCode
from .errors import AuthenticationFault
from .models import Account

logger = logging.getLogger(__name__)

DEFAULT_AUTHENTICATOR = 'authentication.authenticators.DjangoAuthenticator'
INVALID_CREDENTIALS_MESSAGE = 'Invalid username or password'


@dataclass(frozen=True)
class User:
    """
    What the gate reads from an authenticated user

    Only verified=False rejects the user; a missing (None) flag does not.
    """
    id: object
    verified: bool
    deactivated: bool


class Authenticator(Protocol):
    async def authenticate(self, identifier: str, secret: str) -> User:
        ...


class DjangoAuthenticator:
    """
    Authenticate against django.contrib.auth users

    The identifier is the username. Inactive Django users are still
    returned (as deactivated) so the gate can tell them apart from bad
    credentials. Users without an Account row count as unverified.
    """

    async def authenticate(self, identifier, secret):
        return await sync_to_async(self._authenticate)(identifier, secret)

    def _authenticate(self, identifier, secret):
        UserModel = get_user_model()

        try:
            user = UserModel._default_manager.get_by_natural_key(identifier)
        except UserModel.DoesNotExist:
            # Hash anyway so unknown users take as long as wrong passwords
            UserModel().set_password(secret)
            logger.info("No user found for basic authentication identifier")
            raise AuthenticationFault(
                AuthenticationErrorCode.FAILED_AUTHENTICATION_EXCEPTION,
                INVALID_CREDENTIALS_MESSAGE,
                401
            )

        if not user.check_password(secret):
            logger.info(f"Wrong password for user {user.pk}")
            raise AuthenticationFault(
                AuthenticationErrorCode.FAILED_AUTHENTICATION_EXCEPTION,
                INVALID_CREDENTIALS_MESSAGE,
                401
            )

        account = Account.objects.filter(user=user).first()

        return User(
            id=user.pk,
            verified=bool(account and account.verified),
            deactivated=bool(account and account.deactivated) or not user.is_active,
        )


def load_authenticator():
    """Instantiate the authenticator named by BASIC_AUTH_AUTHENTICATOR"""
    path = getattr(settings, 'BASIC_AUTH_AUTHENTICATOR', DEFAULT_AUTHENTICATOR)
    return import_string(path)()
