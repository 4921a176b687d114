# erpgma/core/metadata.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .exceptions import InvalidContainerError


@dataclass(frozen=True, slots=True)
class ChannelLocation:
    """
    One entry of an ERP's channel-location list.

    Only the label is required; the polar/cartesian coordinates are kept
    when the source provides them, anything else goes into `attrs`.
    """
    label: str
    theta: float | None = None
    radius: float | None = None
    x: float | None = None
    y: float | None = None
    z: float | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.label, str) or not self.label.strip():
            raise InvalidContainerError("ChannelLocation.label must be a non-empty string.")
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidContainerError("ChannelLocation.attrs must be a dict.")

    @classmethod
    def from_mapping(cls, raw: Any) -> "ChannelLocation":
        """Build from an ERPLAB `chanlocs` entry (keyed `labels`, `theta`, ...)."""
        if isinstance(raw, ChannelLocation):
            return raw
        if isinstance(raw, str):
            return cls(label=raw)
        try:
            label = raw["labels"]
        except (KeyError, TypeError) as e:
            raise InvalidContainerError("chanlocs entries must carry a 'labels' field.") from e

        coords = {k: _opt_float(raw.get(k)) for k in ("theta", "radius", "X", "Y", "Z")}
        known = {"labels", "theta", "radius", "X", "Y", "Z"}
        return cls(
            label=str(label),
            theta=coords["theta"],
            radius=coords["radius"],
            x=coords["X"],
            y=coords["Y"],
            z=coords["Z"],
            attrs={k: v for k, v in raw.items() if k not in known},
        )


@dataclass(frozen=True, slots=True)
class ErpMeta:
    """
    Scalar metadata of an ERP container.

    - erpname: name of the ERP set
    - srate: sampling rate in Hz
    - xmin: epoch start in seconds
    - filename / filepath: where the ERP was loaded from (if anywhere)
    """
    erpname: str | None = None
    srate: float | None = None
    xmin: float | None = None
    filename: str | None = None
    filepath: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.srate is not None and not self.srate > 0:
            raise InvalidContainerError(f"ErpMeta.srate must be positive, got {self.srate!r}.")
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidContainerError("ErpMeta.attrs must be a dict.")


def unwrap_scalar(value: Any) -> Any:
    """Unwrap a .mat-style field: empty arrays become None, 1-element arrays their item."""
    if isinstance(value, np.ndarray):
        if value.size == 0:
            return None
        if value.size == 1:
            return value.item()
    return value


def _opt_float(value: Any) -> float | None:
    value = unwrap_scalar(value)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        # non-numeric coordinates count as unknown
        return None
