# test/test_metadata.py
import numpy as np
import pytest

from erpgma.core import ChannelLocation, ErpMeta, InvalidContainerError


def test_channel_location_normalizes_none_attrs():
    loc = ChannelLocation(label="Cz", attrs=None)
    assert loc.attrs == {}


def test_channel_location_rejects_empty_label_and_bad_attrs():
    with pytest.raises(InvalidContainerError):
        ChannelLocation(label="  ")
    with pytest.raises(InvalidContainerError):
        ChannelLocation(label="Cz", attrs=["x"])  # type: ignore[arg-type]


def test_channel_location_from_erplab_mapping():
    loc = ChannelLocation.from_mapping(
        {"labels": "Pz", "theta": 180, "radius": 0.25, "X": -0.5, "Y": np.array([]), "type": "EEG"}
    )
    assert loc.label == "Pz"
    assert loc.theta == 180.0
    assert loc.radius == 0.25
    assert loc.x == -0.5
    assert loc.y is None  # empty coordinate
    assert loc.z is None
    assert loc.attrs == {"type": "EEG"}


def test_channel_location_from_plain_label_and_passthrough():
    assert ChannelLocation.from_mapping("Oz").label == "Oz"
    loc = ChannelLocation(label="Fz")
    assert ChannelLocation.from_mapping(loc) is loc


def test_channel_location_from_mapping_requires_labels():
    with pytest.raises(InvalidContainerError):
        ChannelLocation.from_mapping({"theta": 0})


def test_erp_meta_validation():
    m = ErpMeta(erpname="S01", srate=250.0, xmin=-0.2, attrs=None)
    assert m.attrs == {}
    with pytest.raises(InvalidContainerError):
        ErpMeta(srate=0)
    with pytest.raises(InvalidContainerError):
        ErpMeta(attrs="nope")  # type: ignore[arg-type]
