# erpgma/fit/provenance.py
from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import Any, Callable

import numpy as np

from ..core.container import ErpContainer
from ..core.exceptions import ProvenanceWarning
from ..core.metadata import ChannelLocation
from ..core.selection import ResolvedChannel
from .engine import FitResultLike

logger = logging.getLogger(__name__)

# Container kind tag stored in every provenance record.
ERP_INFO_TYPE = "ERP"


@dataclass(frozen=True, slots=True)
class ErpInfo:
    """
    Where a fit result's data came from.

    `data` is the sequence as extracted from the container, i.e. before
    any polarity inversion.
    """
    setname: str | None
    srate: float | None
    xmin: float | None
    filename: str | None
    filepath: str | None
    data: np.ndarray = field(repr=False)
    binnum: int
    bindescr: str
    ch_label: str
    ch_loc: ChannelLocation
    args_used: Any = field(repr=False)
    x0: Any = field(repr=False)
    type: str = ERP_INFO_TYPE

    def __post_init__(self) -> None:
        d = np.array(self.data, dtype=float, copy=True)
        d.flags.writeable = False
        object.__setattr__(self, "data", d)

    @classmethod
    def from_fit(
        cls,
        container: ErpContainer,
        channel: ResolvedChannel,
        bin_index: int,
        data: np.ndarray,
        x0: Any,
        args_used: Any,
    ) -> "ErpInfo":
        return cls(
            setname=container.erpname,
            srate=container.srate,
            xmin=container.xmin,
            filename=container.filename,
            filepath=container.filepath,
            data=data,
            binnum=bin_index,
            bindescr=container.bindescr[bin_index - 1],
            ch_label=channel.label,
            ch_loc=channel.location,
            args_used=args_used,
            x0=x0,
        )


@dataclass(frozen=True, slots=True)
class AttachOutcome:
    """Result of a best-effort provenance attachment."""
    attached: bool
    identifier: str | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.attached


def _identifier(exc: BaseException) -> str:
    cls = type(exc)
    if cls.__module__ in ("builtins", "__main__"):
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def attach_erp_info(
    result: FitResultLike,
    build: Callable[[], ErpInfo],
    channel_index: int,
) -> AttachOutcome:
    """
    Build an ErpInfo and hand it to `result.add_eeg_info`.

    Any failure in either step is reported as a single ProvenanceWarning
    and returned as a failed outcome; it is never raised.
    """
    try:
        info = build()
        result.add_eeg_info(info, channel_index)
    except Exception as e:
        outcome = AttachOutcome(attached=False, identifier=_identifier(e), message=str(e))
        warnings.warn(
            f"[{outcome.identifier}] Adding ERP info to the fit result failed. "
            f"Error: {outcome.message}",
            ProvenanceWarning,
            stacklevel=3,
        )
        return outcome

    logger.debug("Attached ERP info for channel %d (%s)", channel_index, info.ch_label)
    return AttachOutcome(attached=True)
