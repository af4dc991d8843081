import logging
import math
from dataclasses import replace
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Dict, Iterable

import numpy as np

from config import get_thresholds
from .errors import InvalidInputError
from .history import DailyVolumeHistory, check_non_negative
from .metrics import CANDIDATES_TOTAL, EVALUATIONS_TOTAL, EVAL_SECONDS, REJECTIONS_TOTAL
from .models import EvaluationContext, InstrumentSnapshot, ScoreResult

logger = logging.getLogger(__name__)

VOLUME_RATIO_THRESHOLD = 2
MAX_PRICE_CHANGE_PERCENT = 2
MIN_BUYER_SELLER_RATIO = 3

# trading-day windows: short, medium, mid-long, long
WINDOWS = (2, 5, 10, 20)


def round_half_up(value: float, places: int = 2) -> float:
    """Round to ``places`` decimals with exact halves going up."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def volume_ratio(short_sum: float, short_days: int, long_sum: float, long_days: int) -> float:
    """Average daily volume of the short window over that of the long one."""
    if long_sum == 0:
        return 0
    return (short_sum / short_days) / (long_sum / long_days)


def buyer_seller_ratio(snap: InstrumentSnapshot) -> float:
    """Average buy trade size over average sell trade size, ``0`` if undefined."""
    if snap.buy_volume == 0 or snap.sell_volume == 0:
        return 0
    if snap.buy_trade_count == 0 or snap.sell_trade_count == 0:
        return 0
    return (snap.buy_volume / snap.buy_trade_count) / (
        snap.sell_volume / snap.sell_trade_count
    )


def raw_buyer_seller_ratio(snap: InstrumentSnapshot) -> float:
    """Same ratio without the zero guards.

    Zero denominators follow IEEE float semantics and give ``inf`` or ``nan``.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        buy_avg = np.float64(snap.buy_volume) / np.float64(snap.buy_trade_count)
        sell_avg = np.float64(snap.sell_volume) / np.float64(snap.sell_trade_count)
        return float(buy_avg / sell_avg)


def _normalized(
    snap: InstrumentSnapshot, ctx: EvaluationContext
) -> tuple[InstrumentSnapshot, EvaluationContext]:
    snap = InstrumentSnapshot(
        buy_volume=check_non_negative("buy_volume", snap.buy_volume),
        buy_trade_count=check_non_negative("buy_trade_count", snap.buy_trade_count),
        sell_volume=check_non_negative("sell_volume", snap.sell_volume),
        sell_trade_count=check_non_negative("sell_trade_count", snap.sell_trade_count),
    )
    try:
        plp = float(ctx.price_change_percent)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(
            f"price_change_percent must be numeric, got {ctx.price_change_percent!r}"
        ) from exc
    if not math.isfinite(plp):
        raise InvalidInputError(f"price_change_percent must be finite, got {plp!r}")
    ctx = replace(
        ctx,
        price_change_percent=plp,
        current_day_volume=check_non_negative("current_day_volume", ctx.current_day_volume),
    )
    return snap, ctx


def _failed_gate(
    snap: InstrumentSnapshot,
    ctx: EvaluationContext,
    vol20: float,
    cfg: Dict,
) -> str | None:
    if ctx.price_change_percent > cfg.get("max_price_change_percent", MAX_PRICE_CHANGE_PERCENT):
        return "price_change"
    if ctx.current_day_volume < cfg.get("volume_ratio", VOLUME_RATIO_THRESHOLD) * vol20 / 20:
        return "volume"
    if snap.buy_trade_count == 0 or snap.sell_trade_count == 0:
        return "buyer_seller"
    ratio = raw_buyer_seller_ratio(snap)
    if math.isnan(ratio) or ratio < cfg.get("min_buyer_seller_ratio", MIN_BUYER_SELLER_RATIO):
        return "buyer_seller"
    return None


def evaluate(
    is_eligible: Callable[[], bool],
    daily_volumes: Iterable[float] | DailyVolumeHistory,
    snapshot: InstrumentSnapshot,
    context: EvaluationContext,
    cfg: Dict | None = None,
) -> ScoreResult:
    """Decide whether an instrument is a momentum/volume breakout candidate.

    Raises :class:`~screener.errors.InsufficientHistoryError` when fewer than
    20 trading days of history are available and
    :class:`~screener.errors.InvalidInputError` on negative or NaN inputs.
    """
    cfg = cfg or get_thresholds()
    EVALUATIONS_TOTAL.inc()
    if not is_eligible():
        REJECTIONS_TOTAL.labels(gate="ineligible").inc()
        return ScoreResult(passed=False, reason="ineligible")

    with EVAL_SECONDS.time():
        snapshot, context = _normalized(snapshot, context)
        history = (
            daily_volumes
            if isinstance(daily_volumes, DailyVolumeHistory)
            else DailyVolumeHistory(daily_volumes)
        )
        vol2, vol5, vol10, vol20 = (history.volume_over_trading_days(n) for n in WINDOWS)

        gate = _failed_gate(snapshot, context, vol20, cfg)
        result = ScoreResult(
            passed=gate is None,
            short_vs_medium_volume_ratio=round_half_up(volume_ratio(vol2, 2, vol10, 10)),
            medium_vs_long_volume_ratio=round_half_up(volume_ratio(vol5, 5, vol20, 20)),
            buyer_to_seller_intensity_ratio=round_half_up(buyer_seller_ratio(snapshot)),
            reason=gate,
        )

    if gate is None:
        CANDIDATES_TOTAL.inc()
        logger.info("Breakout candidate %s", context.symbol or "<unnamed>")
    else:
        REJECTIONS_TOTAL.labels(gate=gate).inc()
        logger.debug("Rejected %s at %s gate", context.symbol or "<unnamed>", gate)
    return result


def is_candidate(
    is_eligible: Callable[[], bool],
    daily_volumes: Iterable[float] | DailyVolumeHistory,
    snapshot: InstrumentSnapshot,
    context: EvaluationContext,
    cfg: Dict | None = None,
) -> bool:
    """Boolean shorthand for :func:`evaluate`."""
    return evaluate(is_eligible, daily_volumes, snapshot, context, cfg).passed
