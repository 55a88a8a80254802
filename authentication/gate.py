"""
Basic authentication gate

Decides what happens to a request based on its Authorization header:

1. No header: pass through unauthenticated (views decide if that's allowed)
2. Malformed header or wrong scheme: reject with 400
3. Credentials decoded and handed to the authenticator, exactly once
4. Unverified or deactivated account: reject with 401
5. Otherwise: continue with the user's id as the request identity

Authenticator failures are handed to the error channel instead of being
answered here. This module knows nothing about Django; the middleware in
config.middleware turns decisions into responses.
"""
import asyncio
import base64
import binascii
import logging
from dataclasses import dataclass

from .error_codes import AuthenticationErrorCode
from .errors import ServiceError

logger = logging.getLogger(__name__)

BASIC_SCHEME = 'Basic'
DEFAULT_FAULT_STATUS = 401

NOT_BASIC_MESSAGE = "Not 'Basic' authentication"
MISSING_TOKEN_MESSAGE = 'Basic authentication credentials were not provided'
UNDECODABLE_TOKEN_MESSAGE = 'Basic authentication credentials could not be decoded'
VERIFICATION_REQUIRED_MESSAGE = (
    'This account has not been verified. '
    'Check your email for the account verification link.'
)
DEACTIVATED_MESSAGE = 'Your account has been deactivated, please check your email to see why.'
INTERNAL_FAULT_MESSAGE = 'Authentication could not be completed'


class ParseError(ValueError):
    """Authorization header could not be turned into credentials"""


@dataclass(frozen=True)
class Credentials:
    identifier: str
    secret: str


@dataclass(frozen=True)
class Continue:
    """Authenticated: proceed with this identity"""
    identity: object


@dataclass(frozen=True)
class Reject:
    """Answer the request here with a JSON error"""
    status: int
    code: AuthenticationErrorCode
    message: str

    def to_dict(self):
        return {'code': str(self.code), 'message': self.message}


@dataclass(frozen=True)
class PassThrough:
    """No credentials were offered"""


@dataclass(frozen=True)
class Propagate:
    """Hand the error to the pipeline's error handler"""
    error: ServiceError


def validate_header(header):
    """
    Check the header is a non-blank string

    Raises:
        ParseError: with a message suitable for the client
    """
    if not isinstance(header, str):
        raise ParseError('"authorization" must be a string')
    if not header.strip():
        raise ParseError('"authorization" is not allowed to be empty')
    return header


def parse_authorization_header(header):
    """
    Split an Authorization header into (scheme, token)

    Only the first two space separated tokens are used, anything after the
    token is ignored. A header without a token gives an empty token.
    """
    validate_header(header)
    parts = header.split(' ')
    scheme = parts[0]
    token = parts[1] if len(parts) > 1 else ''
    return scheme, token


def decode_credentials(token):
    """
    Decode a Basic token into Credentials

    The identifier is everything before the first colon and the secret
    everything after it, so secrets may contain colons. Without a colon the
    secret is empty. Missing base64 padding is tolerated.
    """
    padded = token + '=' * (-len(token) % 4)
    try:
        decoded = base64.b64decode(padded, validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ParseError(UNDECODABLE_TOKEN_MESSAGE) from e

    identifier, _, secret = decoded.partition(':')
    return Credentials(identifier=identifier, secret=secret)


def encode_credentials(identifier, secret):
    """Build the token part of a Basic Authorization header"""
    raw = f'{identifier}:{secret}'.encode('utf-8')
    return base64.b64encode(raw).decode('ascii')


def basic_authorization_header(identifier, secret):
    return f'{BASIC_SCHEME} {encode_credentials(identifier, secret)}'


def _invalid(message):
    return Reject(400, AuthenticationErrorCode.INVALID_AUTHORIZATION_TYPE_EXCEPTION, message)


async def _authenticate(authenticator, credentials, timeout):
    call = authenticator.authenticate(credentials.identifier, credentials.secret)
    if timeout:
        return await asyncio.wait_for(call, timeout)
    return await call


async def handle(header, authenticator, timeout=None, internal_fault_status=DEFAULT_FAULT_STATUS):
    """
    Run the gate for one request

    Args:
        header: raw Authorization header value, or None when absent
        authenticator: object with ``async authenticate(identifier, secret)``
        timeout: seconds to wait for the authenticator, None or 0 to wait forever
        internal_fault_status: status given to unexpected authenticator errors

    Returns:
        Continue, Reject, PassThrough or Propagate
    """
    if header is None or header == '':
        logger.debug("No authorization header, passing through unauthenticated")
        return PassThrough()

    try:
        scheme, token = parse_authorization_header(header)
    except ParseError as e:
        logger.warning(f"Invalid authorization header: {e}")
        return _invalid(str(e))

    if scheme != BASIC_SCHEME:
        logger.warning(f"Rejected authorization scheme {scheme!r}")
        return _invalid(NOT_BASIC_MESSAGE)

    if not token:
        logger.warning("Basic authorization header without credentials")
        return _invalid(MISSING_TOKEN_MESSAGE)

    try:
        credentials = decode_credentials(token)
    except ParseError as e:
        logger.warning(f"Invalid basic credentials: {e}")
        return _invalid(str(e))

    # CancelledError is not an Exception; an aborted request leaves no trace
    try:
        user = await _authenticate(authenticator, credentials, timeout)
    except ServiceError as fault:
        if fault.http_code is None:
            fault.http_code = DEFAULT_FAULT_STATUS
        logger.info(f"Basic authentication failed: {fault.error_code}")
        return Propagate(fault)
    except asyncio.TimeoutError:
        logger.error(f"Authenticator timed out on basic authentication middleware (timeout={timeout})")
        return Propagate(_internal_fault(internal_fault_status))
    except Exception:
        logger.exception("Error on basic authentication middleware")
        return Propagate(_internal_fault(internal_fault_status))

    if user.verified is False:
        return Reject(401, AuthenticationErrorCode.ACCOUNT_VERIFICATION_EXCEPTION, VERIFICATION_REQUIRED_MESSAGE)

    if user.deactivated:
        return Reject(401, AuthenticationErrorCode.ACCOUNT_DEACTIVATED_EXCEPTION, DEACTIVATED_MESSAGE)

    logger.info(f"Authenticated user {user.id} with basic authentication")
    return Continue(identity=user.id)


def _internal_fault(status):
    return ServiceError(
        AuthenticationErrorCode.FAILED_AUTHENTICATION_EXCEPTION,
        INTERNAL_FAULT_MESSAGE,
        status,
    )
