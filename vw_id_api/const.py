"""const.py"""

# pylint:disable=invalid-name,missing-class-docstring

from enum import Enum

DOMAIN: str = "vw_id_api"

BASE_URL: str = "https://mobileapi.apps.emea.vwapps.io"
VEHICLES_URL: str = f"{BASE_URL}/vehicles"
STATUS_URL: str = f"{VEHICLES_URL}/%s/status"
ACTION_URL: str = f"{VEHICLES_URL}/%s/%s/%s"

VIN_PLACEHOLDER: str = "%s"

ACCEPT_JSON: str = "application/json"

TARGET_SOC_RANGE = range(0, 101)


class ACTION(Enum):
    CHARGING = "charging"
    CLIMATISATION = "climatisation"


class ACTION_VALUE(Enum):
    START = "start"
    STOP = "stop"
    # charging only, carries a body instead of being a plain trigger
    SETTINGS = "settings"
