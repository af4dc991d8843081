class ScreenerError(ValueError):
    """Base class for screener input errors."""


class InsufficientHistoryError(ScreenerError):
    """Daily history ran out before enough trading days were found."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"need {required} trading days of volume history, got {available}"
        )


class InvalidInputError(ScreenerError):
    """Negative, NaN or non-numeric value passed to the screener."""
