# erpgma/fit/erp.py
"""
Fit a Gamma PDF to one channel/bin of an ERP container.

`fit_erp` is a comfort wrapper around a Gamma-PDF fitting engine: it selects
the data from the container, optionally inverts its polarity, calls the
engine and records the ERP provenance on the returned result.
"""
from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable

import numpy as np

from ..core.container import ErpContainer, find_channel_index, is_erp_container
from ..core.exceptions import InvalidContainerError
from ..core.selection import (
    LabelLookup,
    as_channel_selector,
    resolve_channel,
    select_bin,
)
from .engine import FitEngine, FitResultLike
from .options import FitOptions, FitWindow
from .provenance import ErpInfo, attach_erp_info

logger = logging.getLogger(__name__)


def validate_container(
    container: object,
    *,
    predicate: Callable[[object], bool] = is_erp_container,
) -> ErpContainer:
    if not predicate(container) or getattr(container, "is_empty", True):
        raise InvalidContainerError(
            "Invalid ERP container. Input must be a valid ERP structure holding data."
        )
    return container  # type: ignore[return-value]


def extract_data(
    container: ErpContainer,
    channel_index: int,
    bin_index: int,
    *,
    invert: bool = False,
) -> np.ndarray:
    """
    Return a copy of data[channel, :, bin] (1-based indices) as floats.

    With `invert=True` the sign of every sample is flipped.
    """
    data = np.array(container.data[channel_index - 1, :, bin_index - 1], dtype=float)
    if invert:
        return -data
    return data


def fit_erp(
    erp: ErpContainer,
    channel: int | str,
    bin_index: int,
    win_start: int = 1,
    win_length: int | None = None,
    *,
    engine: FitEngine,
    invert_data: bool = False,
    predicate: Callable[[object], bool] = is_erp_container,
    lookup: LabelLookup = find_channel_index,
    **options: Any,
) -> tuple[FitResultLike, Any, Any]:
    """
    Fit the engine to one channel and bin of `erp`.

    Parameters
    ----------
    erp:
        The ERP container.
    channel:
        1-based channel index or channel label.
    bin_index:
        1-based bin index.
    win_start, win_length:
        Search window passed to the engine. `win_length` defaults to the
        number of samples.
    engine:
        Callable performing the fit, see `FitEngine`.
    invert_data:
        Reverse the polarity of the selected data before fitting.
    predicate, lookup:
        Container check and label-to-index lookup.
    **options:
        Passed to the engine unvalidated.

    Returns
    -------
    result, x0, args_used
        As returned by the engine. `result` additionally carries the ERP
        info if it could be attached.
    """
    container = validate_container(erp, predicate=predicate)

    ch = resolve_channel(as_channel_selector(channel), container, lookup=lookup)
    b = select_bin(bin_index, container)
    window = FitWindow(start=win_start, length=win_length).resolve(container.n_samples)
    opts = FitOptions({**options, "invert_data": invert_data})

    data = extract_data(container, ch.index, b)
    gdata = extract_data(container, ch.index, b, invert=True) if opts.invert_data else data

    forwarded = opts.forwarded()
    logger.debug(
        "Fitting channel %d (%s), bin %d, window (%d, %d), inverted=%s, options=%s",
        ch.index, ch.label, b, window.start, window.length, opts.invert_data,
        sorted(forwarded),
    )
    result, x0, args_used = engine(gdata, window.start, window.length, **forwarded)

    attach_erp_info(
        result,
        partial(ErpInfo.from_fit, container, ch, b, data, x0, args_used),
        ch.index,
    )
    return result, x0, args_used
