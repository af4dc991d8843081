import math
from typing import Iterable

import numpy as np

from .errors import InsufficientHistoryError, InvalidInputError


class DailyVolumeHistory:
    """Daily total volumes ordered most-recent-first.

    Days with a volume of exactly zero are holidays or halted sessions and
    never count towards a trading-day window.
    """

    def __init__(self, volumes: Iterable[float]) -> None:
        try:
            arr = np.asarray(list(volumes), dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"daily volumes must be numeric: {exc}") from exc
        if arr.ndim != 1:
            raise InvalidInputError("daily volumes must be a flat sequence")
        if not np.isfinite(arr).all():
            raise InvalidInputError("daily volumes contain NaN or infinite values")
        if (arr < 0).any():
            raise InvalidInputError("daily volumes contain negative values")
        self._volumes = arr

    @property
    def trading_days(self) -> int:
        """Number of days with non-zero volume."""
        return int(np.count_nonzero(self._volumes))

    def volume_over_trading_days(self, n: int) -> float:
        """Sum volume over the ``n`` most recent days that actually traded."""
        total = 0.0
        counted = 0
        for vol in self._volumes:
            if counted >= n:
                break
            if vol == 0:
                continue
            total += float(vol)
            counted += 1
        if counted < n:
            raise InsufficientHistoryError(n, counted)
        return total

    def __len__(self) -> int:
        return len(self._volumes)


def volume_over_trading_days(volumes: Iterable[float], n: int) -> float:
    return DailyVolumeHistory(volumes).volume_over_trading_days(n)


def check_non_negative(name: str, value: float) -> float:
    """Return ``value`` as float or raise :class:`InvalidInputError`."""
    try:
        val = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be numeric, got {value!r}") from exc
    if not math.isfinite(val) or val < 0:
        raise InvalidInputError(f"{name} must be a finite non-negative number, got {value!r}")
    return val
