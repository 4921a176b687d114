# erpgma/core/container.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

import numpy as np

from .exceptions import InvalidContainerError
from .metadata import ChannelLocation, ErpMeta, unwrap_scalar


@dataclass(frozen=True, slots=True)
class ErpContainer:
    """
    Trial-averaged ERP data of one subject/set.

    `data` is indexed [channel, sample, bin]. Channels are described by
    `chanlocs` and bins by `bindescr`, both in the same order as the cube.

    Design goals:
    - consistent: cube shape and descriptor lengths always agree
    - read-only: the cube is stored as a non-writeable view
    - an empty cube is allowed here; callers that need data reject it
    """
    data: np.ndarray = field(repr=False)
    chanlocs: tuple[ChannelLocation, ...] = ()
    bindescr: tuple[str, ...] = ()
    meta: ErpMeta = field(default_factory=ErpMeta)

    def __post_init__(self) -> None:
        d = np.asarray(self.data)
        if d.ndim != 3:
            raise InvalidContainerError(
                f"ErpContainer.data must be 3D [channel, sample, bin], got shape {d.shape}"
            )
        if not np.issubdtype(d.dtype, np.number):
            raise InvalidContainerError(f"ErpContainer.data must be numeric, got {d.dtype}")
        if not isinstance(self.meta, ErpMeta):
            raise InvalidContainerError("ErpContainer.meta must be an ErpMeta instance.")

        chanlocs = tuple(ChannelLocation.from_mapping(c) for c in self.chanlocs)
        bindescr = tuple(str(b) for b in self.bindescr)

        if d.shape[0] != len(chanlocs):
            raise InvalidContainerError(
                f"Channel count mismatch: data has {d.shape[0]} channels "
                f"but {len(chanlocs)} channel locations were given."
            )
        if d.shape[2] != len(bindescr):
            raise InvalidContainerError(
                f"Bin count mismatch: data has {d.shape[2]} bins "
                f"but {len(bindescr)} bin descriptors were given."
            )

        view = d.view()
        view.flags.writeable = False
        object.__setattr__(self, "data", view)
        object.__setattr__(self, "chanlocs", chanlocs)
        object.__setattr__(self, "bindescr", bindescr)

    @classmethod
    def from_mapping(cls, erp: Mapping[str, Any]) -> "ErpContainer":
        """
        Build a container from an ERPLAB-style mapping.

        Expected keys: `bindata`, `chanlocs`, `bindescr` and optionally
        `erpname`, `srate`, `xmin`, `filename`, `filepath`.
        """
        if not isinstance(erp, Mapping):
            raise InvalidContainerError("ERP must be a mapping with ERPLAB fields.")
        missing = [k for k in ("bindata", "chanlocs", "bindescr") if k not in erp]
        if missing:
            raise InvalidContainerError(f"ERP mapping lacks required fields: {missing}")

        meta = ErpMeta(
            erpname=_opt_str(erp.get("erpname")),
            srate=_opt_number("srate", erp.get("srate")),
            xmin=_opt_number("xmin", erp.get("xmin")),
            filename=_opt_str(erp.get("filename")),
            filepath=_opt_str(erp.get("filepath")),
        )
        return cls(
            data=np.asarray(erp["bindata"], dtype=float),
            chanlocs=tuple(_as_list(erp["chanlocs"])),
            bindescr=tuple(_as_list(erp["bindescr"])),
            meta=meta,
        )

    # ---- dimensions ----
    @property
    def n_channels(self) -> int:
        return int(self.data.shape[0])

    @property
    def n_samples(self) -> int:
        return int(self.data.shape[1])

    @property
    def n_bins(self) -> int:
        return int(self.data.shape[2])

    @property
    def is_empty(self) -> bool:
        return self.data.size == 0

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(loc.label for loc in self.chanlocs)

    # ---- metadata shortcuts ----
    @property
    def erpname(self) -> str | None:
        return self.meta.erpname

    @property
    def srate(self) -> float | None:
        return self.meta.srate

    @property
    def xmin(self) -> float | None:
        return self.meta.xmin

    @property
    def filename(self) -> str | None:
        return self.meta.filename

    @property
    def filepath(self) -> str | None:
        return self.meta.filepath


def is_erp_container(obj: object) -> bool:
    """Structural predicate: True if `obj` is a consistent ErpContainer."""
    if not isinstance(obj, ErpContainer):
        return False
    data = obj.data
    return (
        isinstance(data, np.ndarray)
        and data.ndim == 3
        and data.shape[0] == len(obj.chanlocs)
        and data.shape[2] == len(obj.bindescr)
    )


def find_channel_index(container: ErpContainer, label: str) -> int | None:
    """
    Return the 1-based index of the channel labelled `label`, or None.

    Matching is exact and case-sensitive. With duplicate labels the first
    channel wins.
    """
    for i, loc in enumerate(container.chanlocs, start=1):
        if loc.label == label:
            return i
    return None


def _as_list(value: Any) -> Iterable[Any]:
    if isinstance(value, (str, Mapping)):
        return [value]
    if isinstance(value, np.ndarray):
        return value.ravel().tolist()
    return list(value)


def _opt_number(name: str, value: Any) -> float | None:
    value = unwrap_scalar(value)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidContainerError(f"ERP field '{name}' must be a number, got {value!r}.") from e


def _opt_str(value: Any) -> str | None:
    value = unwrap_scalar(value)
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return str(value)
