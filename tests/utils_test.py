import pytest

from vw_id_api.exceptions import InvalidAPIResponseError, RequestBuildError
from vw_id_api.utils import expand_uri, get_float, get_int, get_value


def test_expand_uri():
    assert expand_uri("https://x/%s/y", "VIN1") == "https://x/VIN1/y"
    assert expand_uri("https://x/y", "VIN1") == "https://x/y"
    with pytest.raises(RequestBuildError):
        expand_uri("https://x/%s/%s", "VIN1")


def test_get_value_prefers_exact_key():
    assert get_value({"vin": "lower", "VIN": "upper"}, "VIN") == "upper"
    assert get_value({"vin": "lower"}, "VIN") == "lower"
    assert get_value({}, "VIN") is None


def test_get_int():
    assert get_int(57, "x") == 57
    assert get_int(57.0, "x") == 57
    assert get_int(None, "x") is None
    with pytest.raises(InvalidAPIResponseError):
        get_int(False, "x")


def test_get_float():
    assert get_float(21, "x") == 21.0
    with pytest.raises(InvalidAPIResponseError):
        get_float("21", "x")
