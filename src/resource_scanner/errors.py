"""Failures a scan can end with."""


class ScanError(RuntimeError):
    """Base class for every scan failure. A raised scan leaves the agent untouched
    unless stated otherwise on the subclass."""


class InvalidPatternError(ScanError, ValueError):
    """Raised when a pattern is built with a negative or non-integer size."""


class InsufficientEnergyError(ScanError):
    """Raised when the agent cannot pay for the scan."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(f"Scan needs {required} energy but only {available} is available")
        self.required = required
        self.available = available


class NoTilesDiscoverableError(ScanError):
    """Raised when the pattern footprint is empty once clipped to the world."""


class EnergyDebitError(ScanError):
    """Raised when the agent refuses a debit that already passed the energy check."""


class WorldContractError(ScanError):
    """Raised when the world reports a clip-validated coordinate as out of bounds.

    Energy has already been debited at that point.
    """
