"""Momentum/volume breakout screener."""

from .errors import ScreenerError, InsufficientHistoryError, InvalidInputError
from .history import DailyVolumeHistory, volume_over_trading_days
from .models import InstrumentSnapshot, EvaluationContext, ScoreResult
from .rules import (
    evaluate,
    is_candidate,
    VOLUME_RATIO_THRESHOLD,
    MAX_PRICE_CHANGE_PERCENT,
    MIN_BUYER_SELLER_RATIO,
)
from .scanner import Instrument, Screener, to_frame
from .symbols import is_stock_symbol, eligibility_for
from config import load_config, get_thresholds, reload_config

__all__ = [
    "ScreenerError",
    "InsufficientHistoryError",
    "InvalidInputError",
    "DailyVolumeHistory",
    "volume_over_trading_days",
    "InstrumentSnapshot",
    "EvaluationContext",
    "ScoreResult",
    "evaluate",
    "is_candidate",
    "VOLUME_RATIO_THRESHOLD",
    "MAX_PRICE_CHANGE_PERCENT",
    "MIN_BUYER_SELLER_RATIO",
    "Instrument",
    "Screener",
    "to_frame",
    "is_stock_symbol",
    "eligibility_for",
    "load_config",
    "get_thresholds",
    "reload_config",
]
