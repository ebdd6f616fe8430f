# pylint:disable=missing-class-docstring,missing-function-docstring,invalid-name
"""Status records returned by the /vehicles/{vin}/status endpoint.

Field names are readable snake_case; the exact wire names are kept in each
field's metadata and used in both directions by from_dict() and as_dict().
Timestamps are passed through as the vendor formats them.
"""
import logging
from dataclasses import dataclass, field, fields

from .const import DOMAIN
from .exceptions import InvalidAPIResponseError
from .utils import (
    check_list,
    check_object,
    get_bool,
    get_float,
    get_int,
    get_str,
    get_value,
)

_LOGGER = logging.getLogger(__name__)

_DECODERS = {
    str: get_str,
    int: get_int,
    float: get_float,
    bool: get_bool,
}


def wire(name: str, kind=str):
    """Declare a field read from / written to the wire key *name*."""
    return field(default=None, metadata={"wire": name, "kind": kind})


class _Record:
    """Shared wire mapping for the status dataclasses."""

    @classmethod
    def from_dict(cls, data, path: str = None):
        if data is None:
            return None
        path = path or cls.__name__
        check_object(data, path)
        values = {}
        for f in fields(cls):
            name = f.metadata["wire"]
            kind = f.metadata["kind"]
            raw = get_value(data, name)
            if isinstance(kind, type) and issubclass(kind, _Record):
                values[f.name] = kind.from_dict(raw, f"{path}.{name}")
            else:
                values[f.name] = _DECODERS[kind](raw, f"{path}.{name}")
        return cls(**values)

    def as_dict(self) -> dict:
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, _Record):
                value = value.as_dict()
            result[f.metadata["wire"]] = value
        return result


@dataclass
class BatteryStatus(_Record):
    car_captured_timestamp: str = wire("carCapturedTimestamp")
    current_soc_percent: int = wire("currentSOC_pct", int)
    cruising_range_electric_km: int = wire("cruisingRangeElectric_km", int)


@dataclass
class ChargingStatus(_Record):
    car_captured_timestamp: str = wire("carCapturedTimestamp")
    # e.g. readyForCharging, charging
    charging_state: str = wire("chargingState")
    remaining_charging_time_to_complete_min: int = wire(
        "remainingChargingTimeToComplete_min", int
    )
    charge_power_kw: int = wire("chargePower_kW", int)
    charge_rate_kmph: int = wire("chargeRate_kmph", int)


@dataclass
class ChargingSettings(_Record):
    car_captured_timestamp: str = wire("carCapturedTimestamp")
    # reduced, maximum
    max_charge_current_ac: str = wire("maxChargeCurrentAC")
    # sent as a string ("permanent", "off"), not a boolean
    auto_unlock_plug_when_charged: str = wire("autoUnlockPlugWhenCharged")
    target_soc_percent: int = wire("targetSOC_pct", int)


@dataclass
class PlugStatus(_Record):
    car_captured_timestamp: str = wire("carCapturedTimestamp")
    # connected, disconnected
    plug_connection_state: str = wire("plugConnectionState")
    plug_lock_state: str = wire("plugLockState")


@dataclass
class ClimatisationStatus(_Record):
    car_captured_timestamp: str = wire("carCapturedTimestamp")
    remaining_climatisation_time_min: int = wire(
        "remainingClimatisationTime_min", int
    )
    climatisation_state: str = wire("climatisationState")


@dataclass
class ClimatisationSettings(_Record):
    """Climatisation settings.

    Both target temperatures are reported by the backend and kept as sent;
    they are not guaranteed to agree and neither is derived from the other.
    """

    car_captured_timestamp: str = wire("carCapturedTimestamp")
    target_temperature_k: float = wire("targetTemperature_K", float)
    target_temperature_c: float = wire("targetTemperature_C", float)
    climatisation_without_external_power: bool = wire(
        "climatisationWithoutExternalPower", bool
    )
    climatisation_at_unlock: bool = wire("climatisationAtUnlock", bool)
    window_heating_enabled: bool = wire("windowHeatingEnabled", bool)
    zone_front_left_enabled: bool = wire("zoneFrontLeftEnabled", bool)
    zone_front_right_enabled: bool = wire("zoneFrontRightEnabled", bool)
    zone_rear_left_enabled: bool = wire("zoneRearLeftEnabled", bool)
    zone_rear_right_enabled: bool = wire("zoneRearRightEnabled", bool)


@dataclass
class PrimaryEngine(_Record):
    type: str = wire("type")
    current_soc_percent: int = wire("currentSOC_pct", int)
    remaining_range_km: int = wire("remainingRange_km", int)


@dataclass
class RangeStatus(_Record):
    car_captured_timestamp: str = wire("carCapturedTimestamp")
    car_type: str = wire("carType")
    primary_engine: PrimaryEngine = wire("primaryEngine", PrimaryEngine)
    total_range_km: int = wire("totalRange_km", int)


@dataclass
class Status(_Record):
    """Snapshot of all status sections of a vehicle.

    Any section may be None when the backend leaves it out. Climatisation
    status in particular is often missing while the car is asleep.
    """

    battery_status: BatteryStatus = wire("batteryStatus", BatteryStatus)
    charging_status: ChargingStatus = wire("chargingStatus", ChargingStatus)
    charging_settings: ChargingSettings = wire(
        "chargingSettings", ChargingSettings
    )
    plug_status: PlugStatus = wire("plugStatus", PlugStatus)
    range_status: RangeStatus = wire("rangeStatus", RangeStatus)
    climatisation_settings: ClimatisationSettings = wire(
        "climatisationSettings", ClimatisationSettings
    )
    climatisation_status: ClimatisationStatus = wire(
        "climatisationStatus", ClimatisationStatus
    )

    @classmethod
    def from_response(cls, response) -> "Status":
        """Decode a full ``{"data": {...}}`` status response."""
        check_object(response, "response")
        data = get_value(response, "data")
        if data is None:
            _LOGGER.debug(f"{DOMAIN} - Status response without data section")
            return cls()
        status = cls.from_dict(data, "data")
        if status.climatisation_status is None:
            _LOGGER.debug(f"{DOMAIN} - Climatisation status not available")
        return status

    def as_response(self) -> dict:
        return {"data": self.as_dict()}


@dataclass
class VehicleListEntry(_Record):
    vin: str = wire("VIN")
    nickname: str = wire("nickname")


def parse_vehicle_list(response) -> list[str]:
    """Return the VINs of a /vehicles response in backend order."""
    check_object(response, "response")
    data = get_value(response, "data")
    if data is None:
        return []
    result = []
    for index, entry in enumerate(check_list(data, "data")):
        vehicle = VehicleListEntry.from_dict(entry, f"data.{index}")
        if vehicle is None or vehicle.vin is None:
            raise InvalidAPIResponseError(f"data.{index}: vehicle without VIN")
        result.append(vehicle.vin)
    return result
