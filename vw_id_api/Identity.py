"""Identity.py"""

# pylint:disable=missing-function-docstring
import datetime as dt
import logging

from .const import DOMAIN
from .exceptions import AuthenticationError
from .Token import Token

_LOGGER = logging.getLogger(__name__)


class Identity:
    """Source of the bearer token sent with every request.

    The login and refresh flow lives outside this package; implementations
    only have to hand out the token that is current at call time.
    """

    def token(self) -> str:
        """Return the current bearer token"""
        raise NotImplementedError


class TokenIdentity(Identity):
    """Identity backed by an in-memory Token.

    Whoever refreshes the token calls update(); the API reads it again on the
    next request, so no client needs to be rebuilt.
    """

    def __init__(self, token: Token) -> None:
        self._token: Token = token

    def token(self) -> str:
        if self._token is None or not self._token.access_token:
            raise AuthenticationError("No access token available")
        return self._token.access_token

    def update(self, token: Token) -> None:
        _LOGGER.debug(f"{DOMAIN} - Token updated, valid until {token.valid_until}")
        self._token = token

    @property
    def is_valid(self) -> bool:
        if self._token is None or self._token.valid_until is None:
            return False
        valid_until = self._token.valid_until
        if valid_until.tzinfo is None:
            now = dt.datetime.now()
        else:
            now = dt.datetime.now(dt.timezone.utc)
        return valid_until > now
