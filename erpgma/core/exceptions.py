# erpgma/core/exceptions.py
from __future__ import annotations


class ErpFitError(Exception):
    """Base error for all erpgma exceptions."""


# ---- Validation / construction errors ----
class InvalidContainerError(ErpFitError, ValueError):
    """Raised when an ERP container is malformed or holds no data."""


class InvalidFitWindowError(ErpFitError, ValueError):
    """Raised when the search window start/length are not positive integers."""


# ---- Selection errors ----
class ChannelIndexOutOfRangeError(ErpFitError, IndexError):
    """Raised when a numeric channel selector is outside [1, n_channels]."""

    def __init__(self, index: int, n_channels: int) -> None:
        self.index = index
        self.n_channels = n_channels
        super().__init__(
            f"Channel index [{index}] out of range (valid: 1..{n_channels})."
        )


class BinIndexOutOfRangeError(ErpFitError, IndexError):
    """Raised when a bin index is outside [1, n_bins]."""

    def __init__(self, index: object, n_bins: int) -> None:
        self.index = index
        self.n_bins = n_bins
        super().__init__(f"Bin index [{index}] out of range (valid: 1..{n_bins}).")


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class ChannelNotFoundError(ErpFitError, KeyError):
    """Raised when a requested channel label is not present."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(label)

    def __str__(self) -> str:
        return f"Channel name not found: {self.label}."


# ---- Non-fatal ----
class ProvenanceWarning(UserWarning):
    """Emitted when ERP provenance could not be attached to a fit result."""
