import string
from typing import Callable, Iterable

from config import get_symbols_cfg

# trailing "ح" marks subscription rights, not the underlying share
DEFAULT_MARKERS = ("ح",)


def get_markers() -> tuple[str, ...]:
    """Return non-stock suffix markers from config, falling back to defaults."""
    markers = get_symbols_cfg().get("markers")
    return tuple(markers) if markers else DEFAULT_MARKERS


def is_stock_symbol(symbol: str, markers: Iterable[str] | None = None) -> bool:
    """Check whether a symbol denotes an ordinary share.

    Symbols ending in an ASCII digit (bonds, funds, rights series) or in one of the
    ``markers`` are excluded from volume-ratio screening.
    """
    if not symbol:
        return False
    last = symbol[-1]
    if last in string.digits:
        return False
    markers = DEFAULT_MARKERS if markers is None else tuple(markers)
    return last not in markers


def eligibility_for(symbol: str, markers: Iterable[str] | None = None) -> Callable[[], bool]:
    """Bind ``symbol`` into the zero-argument predicate :func:`evaluate` expects."""
    if markers is not None:
        markers = tuple(markers)
    return lambda: is_stock_symbol(symbol, markers)
