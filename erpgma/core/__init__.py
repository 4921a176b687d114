# erpgma/core/__init__.py
"""
Core ERP data model for erpgma.

This module defines the container side of the fitting adapter:
- ErpContainer: [channel, sample, bin] data cube + channel/bin descriptors
- ChannelLocation / ErpMeta: descriptive metadata
- channel/bin selection with range checks

The core layer knows nothing about the fitting engine.
"""

from .container import ErpContainer, is_erp_container, find_channel_index
from .metadata import ChannelLocation, ErpMeta
from .selection import (
    ChannelIndex,
    ChannelLabel,
    ChannelSelector,
    ResolvedChannel,
    as_channel_selector,
    resolve_channel,
    select_bin,
)
from .exceptions import (
    ErpFitError,
    InvalidContainerError,
    InvalidFitWindowError,
    ChannelIndexOutOfRangeError,
    ChannelNotFoundError,
    BinIndexOutOfRangeError,
    ProvenanceWarning,
)


__all__ = [
    # container
    "ErpContainer",
    "is_erp_container",
    "find_channel_index",

    # metadata
    "ChannelLocation",
    "ErpMeta",

    # selection
    "ChannelIndex",
    "ChannelLabel",
    "ChannelSelector",
    "ResolvedChannel",
    "as_channel_selector",
    "resolve_channel",
    "select_bin",

    # exceptions
    "ErpFitError",
    "InvalidContainerError",
    "InvalidFitWindowError",
    "ChannelIndexOutOfRangeError",
    "ChannelNotFoundError",
    "BinIndexOutOfRangeError",
    "ProvenanceWarning",
]
