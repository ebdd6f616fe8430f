# pylint:disable=missing-function-docstring,invalid-name
"""utils.py"""

from .const import VIN_PLACEHOLDER
from .exceptions import InvalidAPIResponseError, RequestBuildError


def get_value(data: dict, key: str):
    """Return data[key], falling back to a case-insensitive match.

    The backend has shipped the same field in different casings
    (``VIN`` / ``vin``), so both must resolve.
    """
    if key in data:
        return data[key]
    folded = key.casefold()
    for name, value in data.items():
        if isinstance(name, str) and name.casefold() == folded:
            return value
    return None


def check_object(value, path: str) -> dict:
    if not isinstance(value, dict):
        raise InvalidAPIResponseError(
            f"{path}: expected object, got {type(value).__name__}"
        )
    return value


def check_list(value, path: str) -> list:
    if not isinstance(value, list):
        raise InvalidAPIResponseError(
            f"{path}: expected array, got {type(value).__name__}"
        )
    return value


def get_int(value, path: str):
    if value is None:
        return None
    # bool is an int subclass but never a valid number on the wire
    if isinstance(value, bool):
        raise InvalidAPIResponseError(f"{path}: expected integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidAPIResponseError(
        f"{path}: expected integer, got {type(value).__name__} {value!r}"
    )


def get_float(value, path: str):
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidAPIResponseError(
            f"{path}: expected number, got {type(value).__name__} {value!r}"
        )
    return float(value)


def get_bool(value, path: str):
    if value is None or isinstance(value, bool):
        return value
    raise InvalidAPIResponseError(
        f"{path}: expected boolean, got {type(value).__name__} {value!r}"
    )


def get_str(value, path: str):
    if value is None or isinstance(value, str):
        return value
    raise InvalidAPIResponseError(
        f"{path}: expected string, got {type(value).__name__} {value!r}"
    )


def expand_uri(uri: str, vin: str) -> str:
    """Substitute vin into uri if it carries a placeholder, else return uri unchanged."""
    count = uri.count(VIN_PLACEHOLDER)
    if count == 0:
        return uri
    if count > 1:
        raise RequestBuildError(
            f"Endpoint template has {count} placeholders, expected at most one: {uri}"
        )
    return uri.replace(VIN_PLACEHOLDER, vin)
