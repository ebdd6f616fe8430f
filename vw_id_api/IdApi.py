"""IdApi.py"""

# pylint:disable=logging-fstring-interpolation,invalid-name
import logging
import typing as ty

import requests
from requests.exceptions import (
    InvalidSchema,
    InvalidURL,
    JSONDecodeError,
    MissingSchema,
)

from .const import (
    ACCEPT_JSON,
    ACTION,
    ACTION_URL,
    ACTION_VALUE,
    DOMAIN,
    STATUS_URL,
    TARGET_SOC_RANGE,
    VEHICLES_URL,
)
from .exceptions import (
    APIError,
    AuthenticationError,
    InvalidAPIResponseError,
    RateLimitingError,
    RequestBuildError,
    TransportError,
)
from .Identity import Identity
from .Status import Status, parse_vehicle_list
from .utils import expand_uri

_LOGGER = logging.getLogger(__name__)

_STATUS_ERRORS = {
    401: AuthenticationError,
    403: AuthenticationError,
    429: RateLimitingError,
}


def _enum_value(value: ty.Union[str, ACTION, ACTION_VALUE]) -> str:
    if isinstance(value, (ACTION, ACTION_VALUE)):
        return value.value
    return value


class IdApi:
    """Client for the VW ID mobile API.

    Holds nothing but its collaborators: the token is read from the identity
    on every request, and without an explicit session each call goes through
    requests.request on its own. An instance can be shared between threads.
    """

    def __init__(
        self,
        identity: Identity,
        logger: logging.Logger = None,
        session: requests.Session = None,
        timeout: ty.Optional[float] = None,
    ) -> None:
        self.identity: Identity = identity
        self.logger: logging.Logger = logger or _LOGGER
        self.session = session
        self.timeout = timeout

    def _get_authenticated_headers(self) -> dict:
        return {
            "Accept": ACCEPT_JSON,
            "Authorization": f"Bearer {self.identity.token()}",
        }

    def _request(self, method: str, url: str, payload: dict = None) -> ty.Any:
        """Send one request and decode its JSON body.

        Raises RequestBuildError, TransportError (APIError for a non-2xx
        status) or InvalidAPIResponseError. Nothing is retried.
        """
        headers = self._get_authenticated_headers()
        send = self.session.request if self.session is not None else requests.request
        self.logger.debug(f"{DOMAIN} - {method} {url}")
        try:
            response = send(
                method, url, headers=headers, json=payload, timeout=self.timeout
            )
        except (InvalidURL, MissingSchema, InvalidSchema) as ex:
            raise RequestBuildError(f"Invalid request {method} {url}: {ex}") from ex
        except requests.RequestException as ex:
            raise TransportError(f"{method} {url} failed: {ex}") from ex

        try:
            response.raise_for_status()
        except requests.HTTPError as ex:
            status_code = response.status_code
            error = _STATUS_ERRORS.get(status_code, APIError)
            raise error(
                f"{method} {url} returned status {status_code}",
                status_code=status_code,
            ) from ex

        try:
            result = response.json()
        except JSONDecodeError as ex:
            raise InvalidAPIResponseError(
                f"{method} {url} returned invalid JSON: {ex}"
            ) from ex
        self.logger.debug(f"{DOMAIN} - {method} {url} response: {result}")
        return result

    def get_vehicles(self) -> list[str]:
        """Return the VINs of all vehicles on the account, in backend order."""
        response = self._request("GET", VEHICLES_URL)
        return parse_vehicle_list(response)

    def get_status(self, vin: str) -> Status:
        """Return the full status of a vehicle.

        The VIN is not validated here; an unknown one is rejected by the
        backend and surfaces as APIError or InvalidAPIResponseError.
        """
        response = self._request("GET", STATUS_URL % vin)
        return Status.from_response(response)

    def perform_action(
        self,
        vin: str,
        action: ty.Union[str, ACTION],
        value: ty.Union[str, ACTION_VALUE],
    ) -> None:
        """Submit an action such as charging/start.

        Only the submission is reported: the body must be valid JSON, but
        whether the vehicle carried the action out is not checked. Poll
        get_status() for that.
        """
        url = ACTION_URL % (vin, _enum_value(action), _enum_value(value))
        self._request("POST", url)

    def start_charging(self, vin: str) -> None:
        self.perform_action(vin, ACTION.CHARGING, ACTION_VALUE.START)

    def stop_charging(self, vin: str) -> None:
        self.perform_action(vin, ACTION.CHARGING, ACTION_VALUE.STOP)

    def start_climatisation(self, vin: str) -> None:
        self.perform_action(vin, ACTION.CLIMATISATION, ACTION_VALUE.START)

    def stop_climatisation(self, vin: str) -> None:
        self.perform_action(vin, ACTION.CLIMATISATION, ACTION_VALUE.STOP)

    def set_charge_settings(self, vin: str, target_soc: int) -> ty.Any:
        """Change the charge target of a vehicle and return the raw response.

        Unlike the other actions, charging/settings carries a JSON body
        (``{"targetSOC_pct": target_soc}``) instead of a bare trigger. Only
        the target SOC is known to be accepted; the backend's contract for
        this call is not documented, so treat the response as unverified.
        """
        if (
            isinstance(target_soc, bool)
            or not isinstance(target_soc, int)
            or target_soc not in TARGET_SOC_RANGE
        ):
            raise ValueError("Target SOC must be an integer between 0 and 100.")
        url = ACTION_URL % (vin, ACTION.CHARGING.value, ACTION_VALUE.SETTINGS.value)
        return self._request("POST", url, {"targetSOC_pct": target_soc})

    def fetch_any(self, uri: str, vin: str) -> ty.Any:
        """GET an arbitrary endpoint and return the decoded JSON as is.

        A single ``%s`` in *uri* is replaced by *vin*; without one the uri is
        used unchanged.
        """
        return self._request("GET", expand_uri(uri, vin))
