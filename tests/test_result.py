"""Result type and clock tests."""

import pytest

from service_hub_api.app.core.errors import ErrorKind, NoReviews, NotFound, ServiceMissing
from service_hub_api.app.core.identity import MonotonicClock, uuid_id
from service_hub_api.app.core.result import Err, Ok, capture


def test_capture_wraps_return_value():
    assert capture("op", lambda: 42) == Ok(42)


def test_capture_converts_service_hub_errors():
    def fail():
        raise NoReviews("nothing to average")

    assert capture("op", fail) == Err(ErrorKind.NO_REVIEWS, "nothing to average")


def test_capture_does_not_swallow_other_errors():
    def fail():
        raise RuntimeError("disk on fire")

    with pytest.raises(RuntimeError):
        capture("op", fail)


def test_err_unwrap_reraises_matching_kind():
    with pytest.raises(ServiceMissing) as info:
        Err(ErrorKind.SERVICE_MISSING, "Service does not exist").unwrap()

    assert isinstance(info.value, NotFound)
    assert info.value.message == "Service does not exist"


def test_ok_and_err_flags():
    assert Ok(None).is_ok
    assert not Err(ErrorKind.NOT_FOUND, "x").is_ok


def test_monotonic_clock_never_goes_back():
    readings = iter([100, 50, 200])
    clock = MonotonicClock(source=lambda: next(readings))

    assert [clock(), clock(), clock()] == [100, 100, 200]


def test_uuid_ids_are_unique():
    assert len({uuid_id() for _ in range(100)}) == 100
