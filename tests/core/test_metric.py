"""Tests for metric time encoding, decoding and stepping."""

from __future__ import annotations

import random

import pytest

from metric_clock.core.metric import (
    SECONDS_IN_DDD,
    SECONDS_IN_HH,
    SECONDS_IN_YY,
    MetricTime,
    decode,
    encode,
    floor_divmod,
    normalize,
    step,
)

# Pre-epoch, epoch, boundaries and far-off instants
SAMPLE_SECONDS = [
    0,
    1,
    -1,
    999,
    1_000,
    99_999,
    100_000,
    SECONDS_IN_YY - 1,
    SECONDS_IN_YY,
    -SECONDS_IN_YY,
    -SECONDS_IN_YY - 1,
    1_700_600_000,
    -1_234_567_890,
    10**15 + 7,
    -(10**15) - 7,
]


def _random_seconds(count: int = 200) -> list[int]:
    rng = random.Random(1970)
    return [rng.randint(-(10**12), 10**12) for _ in range(count)]


def test_encode_epoch() -> None:
    assert encode(0) == MetricTime(yy=0, ddd=0, hh=0, mmm=0)


def test_encode_splits_every_radix() -> None:
    assert encode(100_001_456) == MetricTime(yy=1, ddd=0, hh=1, mmm=456)
    # 100_123_456 = 1*10^8 + 1*10^5 + 23*10^3 + 456
    assert encode(100_123_456) == MetricTime(yy=1, ddd=1, hh=23, mmm=456)


def test_encode_one_second_before_epoch() -> None:
    assert encode(-1) == MetricTime(yy=-1, ddd=999, hh=99, mmm=999)


@pytest.mark.parametrize("seconds", SAMPLE_SECONDS + _random_seconds())
def test_round_trip(seconds: int) -> None:
    assert decode(encode(seconds)) == seconds


@pytest.mark.parametrize("seconds", SAMPLE_SECONDS + _random_seconds())
def test_encode_field_bounds(seconds: int) -> None:
    metric = encode(seconds)
    assert 0 <= metric.ddd <= 999
    assert 0 <= metric.hh <= 99
    assert 0 <= metric.mmm <= 999


def test_decode_is_weighted_sum() -> None:
    metric = MetricTime(yy=-3, ddd=42, hh=7, mmm=5)
    assert decode(metric) == -3 * 10**8 + 42 * 10**5 + 7 * 10**3 + 5


def test_decode_folds_out_of_range_fields() -> None:
    assert decode(MetricTime(yy=0, ddd=1500, hh=0, mmm=0)) == 1500 * SECONDS_IN_DDD
    assert decode(MetricTime(yy=1, ddd=0, hh=-1, mmm=0)) == SECONDS_IN_YY - SECONDS_IN_HH


def test_normalize_folds_overshoot() -> None:
    assert normalize(MetricTime(yy=0, ddd=1500, hh=0, mmm=0)) == MetricTime(yy=1, ddd=500)
    assert normalize(MetricTime(yy=0, ddd=0, hh=0, mmm=-1)) == MetricTime(
        yy=-1, ddd=999, hh=99, mmm=999
    )


@pytest.mark.parametrize(
    ("value", "radix", "expected"),
    [
        (7, 3, (2, 1)),
        (-7, 3, (-3, 2)),
        (-1, 1000, (-1, 999)),
        (0, 1000, (0, 0)),
    ],
)
def test_floor_divmod_remainder_is_non_negative(
    value: int, radix: int, expected: tuple[int, int]
) -> None:
    assert floor_divmod(value, radix) == expected


class TestStep:
    """Stepping by years and days with carry across the year boundary."""

    def test_carry_into_next_year(self) -> None:
        assert step(MetricTime(yy=5, ddd=995), 0, 10) == MetricTime(yy=6, ddd=5)

    def test_borrow_from_previous_year(self) -> None:
        assert step(MetricTime(yy=5, ddd=3), 0, -10) == MetricTime(yy=4, ddd=993)

    def test_zero_step_is_identity(self) -> None:
        metric = MetricTime(yy=17, ddd=6, hh=42, mmm=7)
        assert step(metric, 0, 0) == metric
        assert decode(step(metric, 0, 0)) == decode(metric)

    def test_keeps_time_of_day(self) -> None:
        stepped = step(MetricTime(yy=1, ddd=950, hh=12, mmm=345), 1, 100)
        assert stepped == MetricTime(yy=3, ddd=50, hh=12, mmm=345)

    def test_year_steps_only_move_yy(self) -> None:
        assert step(MetricTime(yy=0, ddd=500), -1, 0) == MetricTime(yy=-1, ddd=500)

    def test_exact_multiple_of_a_year_backwards(self) -> None:
        assert step(MetricTime(yy=5, ddd=0), 0, -1000) == MetricTime(yy=4, ddd=0)
        assert step(MetricTime(yy=5, ddd=0), 0, -1001) == MetricTime(yy=3, ddd=999)

    def test_large_deltas(self) -> None:
        assert step(MetricTime(yy=0, ddd=10), 0, 12_345) == MetricTime(yy=12, ddd=355)
        assert step(MetricTime(yy=0, ddd=10), 0, -12_345) == MetricTime(yy=-13, ddd=665)

    @pytest.mark.parametrize("delta_days", [-100_001, -1000, -999, -100, -10, -1, 0, 1, 10, 100, 999, 1000, 54_321])
    @pytest.mark.parametrize("delta_years", [-2, 0, 3])
    def test_result_is_normalized_and_consistent(self, delta_years: int, delta_days: int) -> None:
        metric = MetricTime(yy=17, ddd=6, hh=1, mmm=2)
        stepped = step(metric, delta_years, delta_days)
        assert 0 <= stepped.ddd <= 999
        expected = decode(metric) + delta_years * SECONDS_IN_YY + delta_days * SECONDS_IN_DDD
        assert decode(stepped) == expected
