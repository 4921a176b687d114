# erpgma/fit/options.py
from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping

import numpy as np

from ..core.exceptions import InvalidFitWindowError

logger = logging.getLogger(__name__)

# Options consumed by the adapter itself; never forwarded to the engine.
RESERVED_KEYS: tuple[str, ...] = ("invert_data",)

# Options the Gamma-PDF engine is known to accept. Informational only:
# other keys are forwarded as well.
KNOWN_ENGINE_OPTIONS: frozenset[str] = frozenset({
    "optimize_full",
    "seg_min_length",
    "seg_pad",
    "seg_extension",
    "max_src_it",
    "log_enabled",
    "log_src",
    "log_fn",
    "cost_fn",
    "ps_type",
    "ps_max_it",
    "xtol",
    "ftol",
})


def _positive_index(value: object) -> int | None:
    """Return `value` as a plain int if it is a positive integer, else None."""
    if isinstance(value, (bool, np.bool_)) or not hasattr(value, "__index__"):
        return None
    index = operator.index(value)
    return index if index > 0 else None


@dataclass(frozen=True, slots=True)
class FitWindow:
    """
    Search window for the component of interest, in 1-based samples.

    `length=None` means "up to the full sample count" and is filled in by
    `resolve()`. Whether start + length fits the data is left to the engine.
    """
    start: int = 1
    length: int | None = None

    def __post_init__(self) -> None:
        start = _positive_index(self.start)
        if start is None:
            raise InvalidFitWindowError(
                f"Window start must be a positive integer, got {self.start!r}."
            )
        object.__setattr__(self, "start", start)

        if self.length is not None:
            length = _positive_index(self.length)
            if length is None:
                raise InvalidFitWindowError(
                    f"Window length must be a positive integer, got {self.length!r}."
                )
            object.__setattr__(self, "length", length)

    def resolve(self, n_samples: int) -> "FitWindow":
        if self.length is not None:
            return self
        return FitWindow(start=self.start, length=max(1, int(n_samples)))


@dataclass(frozen=True, slots=True)
class FitOptions(Mapping[str, Any]):
    """
    Named options of a fit call.

    Reserved keys (see RESERVED_KEYS) are interpreted here; every other key
    is an engine option and passes through untouched.
    """
    entries: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.entries, Mapping):
            raise TypeError("FitOptions.entries must be a mapping.")
        normalized = dict(self.entries)
        for key in normalized:
            if not isinstance(key, str):
                raise TypeError(f"Option names must be strings, got {key!r}.")
        invert = normalized.get("invert_data", False)
        if not isinstance(invert, (bool, np.bool_)):
            raise TypeError(f"invert_data must be a bool, got {invert!r}.")
        if "invert_data" in normalized:
            normalized["invert_data"] = bool(invert)
        object.__setattr__(self, "entries", normalized)

    # ---- Mapping API ----
    def __getitem__(self, key: str) -> Any:
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    # ---- reserved keys ----
    @property
    def invert_data(self) -> bool:
        return self.entries.get("invert_data", False)

    def forwarded(self) -> dict[str, Any]:
        """Engine options: everything except the reserved keys, verbatim."""
        out = {k: v for k, v in self.entries.items() if k not in RESERVED_KEYS}
        unknown = sorted(set(out) - KNOWN_ENGINE_OPTIONS)
        if unknown:
            logger.debug("Forwarding options unknown to the adapter: %s", unknown)
        return out
