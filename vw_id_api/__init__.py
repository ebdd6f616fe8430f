"""Top-level package for the VW ID mobile API."""

# flake8: noqa
from .IdApi import IdApi
from .Identity import Identity, TokenIdentity
from .Token import Token
from .Status import (
    BatteryStatus,
    ChargingSettings,
    ChargingStatus,
    ClimatisationSettings,
    ClimatisationStatus,
    PlugStatus,
    PrimaryEngine,
    RangeStatus,
    Status,
)

from .const import ACTION, ACTION_VALUE
from .exceptions import (
    VwIdException,
    RequestBuildError,
    TransportError,
    APIError,
    AuthenticationError,
    RateLimitingError,
    InvalidAPIResponseError,
)
