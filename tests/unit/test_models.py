import math

import pytest

from timer_publisher.domain.models import (
    DEFAULT_INTERVAL,
    CountdownArgs,
    InvalidInterval,
    resolve_interval,
    validate_interval,
    validate_seconds,
)


def test_default_interval_is_half_a_second():
    assert DEFAULT_INTERVAL == 0.5


@pytest.mark.parametrize("interval", [0.5, 1, 0.001, 30.0])
def test_validate_interval_accepts_positive_numbers(interval):
    assert validate_interval(interval) == float(interval)


@pytest.mark.parametrize("interval", [0, 0.0, -0.5, -10, math.nan, math.inf, "0.5", None, True])
def test_validate_interval_rejects_bad_values(interval):
    with pytest.raises(InvalidInterval):
        validate_interval(interval)


def test_invalid_interval_is_a_value_error():
    with pytest.raises(ValueError):
        validate_interval(-1)


def test_resolve_interval_falls_back_to_default():
    assert resolve_interval(None) == DEFAULT_INTERVAL
    assert resolve_interval(None, default=2.0) == 2.0
    assert resolve_interval(0.3) == 0.3


def test_countdown_args_defaults_interval_to_none():
    args = CountdownArgs(countdown_from=10.0, reference_time=1_000.0)
    assert args.interval is None


def test_countdown_args_rejects_bad_interval():
    with pytest.raises(InvalidInterval):
        CountdownArgs(countdown_from=10.0, reference_time=1_000.0, interval=0.0)


def test_countdown_args_accepts_negative_countdown_from():
    args = CountdownArgs(countdown_from=-5.0, reference_time=1_000.0, interval=0.5)
    assert args.countdown_from == -5.0


def test_countdown_args_is_immutable():
    args = CountdownArgs(countdown_from=10.0, reference_time=1_000.0)
    with pytest.raises(AttributeError):
        args.countdown_from = 3.0


@pytest.mark.parametrize("field", ["countdown_from", "reference_time"])
@pytest.mark.parametrize("value", ["now", None, True, [1.0]])
def test_countdown_args_rejects_non_numeric_fields(field, value):
    kwargs = {"countdown_from": 10.0, "reference_time": 1_000.0, field: value}
    with pytest.raises(TypeError):
        CountdownArgs(**kwargs)


@pytest.mark.parametrize("field", ["countdown_from", "reference_time"])
def test_countdown_args_rejects_non_finite_fields(field):
    kwargs = {"countdown_from": 10.0, "reference_time": 1_000.0, field: math.inf}
    with pytest.raises(ValueError):
        CountdownArgs(**kwargs)


def test_validate_seconds_accepts_ints():
    assert validate_seconds("reference_time", 1_000) == 1_000.0
