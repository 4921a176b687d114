# erpgma/core/selection.py
from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable, Union

from .container import ErpContainer, find_channel_index
from .exceptions import (
    BinIndexOutOfRangeError,
    ChannelIndexOutOfRangeError,
    ChannelNotFoundError,
)
from .metadata import ChannelLocation


@dataclass(frozen=True, slots=True)
class ChannelIndex:
    """Channel selected by its 1-based position."""
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not hasattr(self.value, "__index__"):
            raise TypeError(f"ChannelIndex.value must be an integer, got {self.value!r}.")
        object.__setattr__(self, "value", operator.index(self.value))


@dataclass(frozen=True, slots=True)
class ChannelLabel:
    """Channel selected by its label."""
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"ChannelLabel.value must be a string, got {self.value!r}.")


ChannelSelector = Union[ChannelIndex, ChannelLabel]
LabelLookup = Callable[[ErpContainer, str], "int | None"]


@dataclass(frozen=True, slots=True)
class ResolvedChannel:
    index: int
    label: str
    location: ChannelLocation


def as_channel_selector(channel: object) -> ChannelSelector:
    """Wrap a raw index or label given at the public boundary."""
    if isinstance(channel, (ChannelIndex, ChannelLabel)):
        return channel
    if isinstance(channel, str):
        return ChannelLabel(channel)
    if hasattr(channel, "__index__") and not isinstance(channel, bool):
        return ChannelIndex(channel)  # type: ignore[arg-type]
    raise TypeError(
        f"channel must be an index (int) or a label (str), got {type(channel).__name__}"
    )


def resolve_channel(
    selector: ChannelSelector,
    container: ErpContainer,
    *,
    lookup: LabelLookup = find_channel_index,
) -> ResolvedChannel:
    """
    Map a channel selector to index, label and location.

    Index selectors must lie in [1, n_channels]; label selectors are
    resolved through `lookup`, which returns None when nothing matches.
    """
    match selector:
        case ChannelIndex(value=index):
            if not 1 <= index <= container.n_channels:
                raise ChannelIndexOutOfRangeError(index, container.n_channels)
            loc = container.chanlocs[index - 1]
            return ResolvedChannel(index=index, label=loc.label, location=loc)

        case ChannelLabel(value=label):
            index = lookup(container, label)
            if index is None:
                raise ChannelNotFoundError(label)
            if not 1 <= index <= container.n_channels:
                raise ChannelIndexOutOfRangeError(index, container.n_channels)
            return ResolvedChannel(
                index=index, label=label, location=container.chanlocs[index - 1]
            )

    raise TypeError(f"Unsupported channel selector: {selector!r}")


def select_bin(bin_index: object, container: ErpContainer) -> int:
    """Validate a 1-based bin index against the container's bins."""
    if (
        isinstance(bin_index, bool)
        or not hasattr(bin_index, "__index__")
        or not 1 <= bin_index.__index__() <= container.n_bins
    ):
        raise BinIndexOutOfRangeError(bin_index, container.n_bins)
    return int(bin_index.__index__())
