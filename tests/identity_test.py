import datetime as dt

import pytest

from vw_id_api.exceptions import AuthenticationError
from vw_id_api.Identity import Identity, TokenIdentity
from vw_id_api.Token import Token


def test_base_identity_is_abstract():
    with pytest.raises(NotImplementedError):
        Identity().token()


def test_token_identity_returns_access_token():
    identity = TokenIdentity(Token(access_token="abc"))
    assert identity.token() == "abc"


def test_token_identity_update():
    identity = TokenIdentity(Token(access_token="abc"))
    identity.update(Token(access_token="def"))
    assert identity.token() == "def"


def test_token_identity_without_token():
    with pytest.raises(AuthenticationError):
        TokenIdentity(Token()).token()
    with pytest.raises(AuthenticationError):
        TokenIdentity(None).token()


def test_is_valid():
    future = dt.datetime.now(dt.timezone.utc) + dt.timedelta(hours=1)
    past = dt.datetime.now() - dt.timedelta(hours=1)
    assert TokenIdentity(Token(access_token="a", valid_until=future)).is_valid
    assert not TokenIdentity(Token(access_token="a", valid_until=past)).is_valid
    assert not TokenIdentity(Token(access_token="a")).is_valid
