import logging
from functools import partial
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Sequence, Tuple

import pandas as pd

import config
from .errors import ScreenerError
from .metrics import ERRORS_TOTAL
from .models import EvaluationContext, InstrumentSnapshot, ScoreResult
from .rules import evaluate
from .symbols import eligibility_for, get_markers


logger = logging.getLogger(__name__)


@dataclass
class Instrument:
    """Everything needed to screen one instrument for a single day."""

    symbol: str
    daily_volumes: Sequence[float]
    snapshot: InstrumentSnapshot
    context: EvaluationContext


class Screener:
    """Run breakout evaluation over a universe of instruments."""

    def __init__(
        self,
        cfg: Dict[str, Any] | None = None,
        eligibility: Callable[[str], Callable[[], bool]] | None = None,
    ) -> None:
        self._cfg = cfg
        if eligibility is None:
            eligibility = partial(eligibility_for, markers=get_markers())
        self.eligibility = eligibility

    @property
    def thresholds(self) -> Dict[str, Any]:
        return self._cfg or config.get_thresholds()

    def scan(self, instruments: Iterable[Instrument]) -> Iterator[Tuple[Instrument, ScoreResult]]:
        """Yield each instrument with its verdict, skipping malformed ones."""
        seen = skipped = 0
        for inst in instruments:
            seen += 1
            try:
                result = evaluate(
                    self.eligibility(inst.symbol),
                    inst.daily_volumes,
                    inst.snapshot,
                    inst.context,
                    self.thresholds,
                )
            except ScreenerError as exc:
                skipped += 1
                ERRORS_TOTAL.labels(error=type(exc).__name__).inc()
                logger.warning("Skipping %s: %s", inst.symbol, exc)
                continue
            yield inst, result
        logger.info("Screened %d instruments, %d skipped", seen, skipped)

    def candidates(self, instruments: Iterable[Instrument]) -> List[str]:
        """Return symbols of instruments passing every gate."""
        return [inst.symbol for inst, res in self.scan(instruments) if res.passed]

    def reload_thresholds(self) -> None:
        config.reload_config()
        self._cfg = None


def to_frame(results: Iterable[Tuple[Instrument, ScoreResult]]) -> pd.DataFrame:
    """Tabulate scan results, one row per instrument."""
    rows = [{"symbol": inst.symbol, **res.as_dict()} for inst, res in results]
    columns = [
        "symbol",
        "passed",
        "short_vs_medium_volume_ratio",
        "medium_vs_long_volume_ratio",
        "buyer_to_seller_intensity_ratio",
        "reason",
    ]
    return pd.DataFrame(rows, columns=columns)
