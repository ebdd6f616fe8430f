import pytest
import requests
from dotenv import load_dotenv
from pytest_socket import disable_socket
from requests.exceptions import JSONDecodeError

from vw_id_api.IdApi import IdApi
from vw_id_api.Identity import TokenIdentity
from vw_id_api.Token import Token


load_dotenv()


def pytest_runtest_setup():
    disable_socket()


@pytest.fixture
def identity():
    return TokenIdentity(Token(access_token="token-1", refresh_token="refresh-1"))


@pytest.fixture
def api(identity):
    return IdApi(identity)


@pytest.fixture
def make_response(mocker):
    """Build a mocked requests.Response."""

    def _make(payload=None, status_code=200, invalid_json=False):
        response = mocker.MagicMock()
        response.status_code = status_code
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(
                f"{status_code} Client Error", response=response
            )
        else:
            response.raise_for_status.return_value = None
        if invalid_json:
            response.json.side_effect = JSONDecodeError(
                "Expecting value", "<html>Bad Gateway</html>", 0
            )
        else:
            response.json.return_value = payload
        return response

    return _make
