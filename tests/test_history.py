import math

import pytest

from screener.errors import InsufficientHistoryError, InvalidInputError
from screener.history import DailyVolumeHistory, check_non_negative, volume_over_trading_days


def test_skips_zero_volume_days():
    assert volume_over_trading_days([0, 0, 100, 0, 50], 2) == 150


def test_window_stops_after_n_trading_days():
    hist = DailyVolumeHistory([10, 0, 20, 30, 40])
    assert hist.volume_over_trading_days(1) == 10
    assert hist.volume_over_trading_days(3) == 60
    assert hist.trading_days == 4
    assert len(hist) == 5


def test_insufficient_history():
    hist = DailyVolumeHistory([0, 10, 0])
    with pytest.raises(InsufficientHistoryError) as exc_info:
        hist.volume_over_trading_days(2)
    assert exc_info.value.required == 2
    assert exc_info.value.available == 1


def test_accepts_generator():
    hist = DailyVolumeHistory(v for v in [5, 0, 5])
    assert hist.volume_over_trading_days(2) == 10


@pytest.mark.parametrize("volumes", [[1, -1, 2], [1, math.nan], [1, math.inf], ["abc"], [[1, 2], [3, 4]]])
def test_rejects_bad_volumes(volumes):
    with pytest.raises(InvalidInputError):
        DailyVolumeHistory(volumes)


def test_check_non_negative():
    assert check_non_negative("x", "2.5") == 2.5
    assert check_non_negative("x", 0) == 0.0
    with pytest.raises(InvalidInputError):
        check_non_negative("x", -0.1)
    with pytest.raises(InvalidInputError):
        check_non_negative("x", None)
    with pytest.raises(InvalidInputError):
        check_non_negative("x", math.inf)
