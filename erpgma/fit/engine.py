# erpgma/fit/engine.py
from __future__ import annotations

from typing import Any, Protocol

import numpy as np


class FitResultLike(Protocol):
    """Structural interface of the result object returned by a fitting engine."""

    def add_eeg_info(self, info: Any, channel_index: int) -> None: ...


class FitEngine(Protocol):
    """
    Gamma-PDF fitting engine.

    Called with the 1-D data, the search window and the forwarded options;
    returns (result, initial guess, arguments used).
    """

    def __call__(
        self,
        data: np.ndarray,
        win_start: int,
        win_length: int,
        **options: Any,
    ) -> tuple[FitResultLike, Any, Any]: ...
