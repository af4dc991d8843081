from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class InstrumentSnapshot:
    """Current-period buy/sell aggregates for one instrument."""

    buy_volume: float
    buy_trade_count: float
    sell_volume: float
    sell_trade_count: float


@dataclass(frozen=True)
class EvaluationContext:
    price_change_percent: float
    current_day_volume: float
    symbol: str = ""


@dataclass(frozen=True)
class ScoreResult:
    """Verdict of a single breakout evaluation.

    Ratio fields are ``None`` when the instrument never got past the
    eligibility gate and ``0`` when their denominator was zero.
    """

    passed: bool
    short_vs_medium_volume_ratio: Optional[float] = None
    medium_vs_long_volume_ratio: Optional[float] = None
    buyer_to_seller_intensity_ratio: Optional[float] = None
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.passed

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
