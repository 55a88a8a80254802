"""
Shared helpers for authentication tests
"""
from unittest.mock import AsyncMock, MagicMock

from authentication.authenticators import User


def make_user(id='u1', verified=True, deactivated=False):
    """Helper to build an authenticator result"""
    return User(id=id, verified=verified, deactivated=deactivated)


def make_authenticator(user=None, error=None):
    """
    Helper to build a mock authenticator

    Resolves with ``user`` (a verified, active u1 by default) or raises
    ``error`` when given.
    """
    authenticator = MagicMock()
    if error is not None:
        authenticator.authenticate = AsyncMock(side_effect=error)
    else:
        authenticator.authenticate = AsyncMock(return_value=user or make_user())
    return authenticator
