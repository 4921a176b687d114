# test/test_container.py
import numpy as np
import pytest

from erpgma.core import (
    ChannelLocation,
    ErpContainer,
    ErpMeta,
    InvalidContainerError,
    find_channel_index,
    is_erp_container,
)


def _erp(n_ch=3, n_samples=100, n_bins=2, labels=None):
    labels = labels or ["Fz", "Cz", "Pz", "Oz", "T7", "T8"][:n_ch]
    data = np.arange(n_ch * n_samples * n_bins, dtype=float).reshape(n_ch, n_samples, n_bins)
    return ErpContainer(
        data=data,
        chanlocs=tuple(ChannelLocation(label=lb) for lb in labels),
        bindescr=tuple(f"bin{i + 1}" for i in range(n_bins)),
        meta=ErpMeta(erpname="S01", srate=250.0, xmin=-0.2),
    )


def test_container_dimensions_and_metadata():
    erp = _erp()
    assert erp.n_channels == 3
    assert erp.n_samples == 100
    assert erp.n_bins == 2
    assert erp.labels == ("Fz", "Cz", "Pz")
    assert erp.erpname == "S01"
    assert erp.srate == 250.0
    assert erp.xmin == -0.2
    assert erp.filename is None
    assert not erp.is_empty


def test_container_data_is_read_only_and_source_untouched():
    src = np.zeros((1, 4, 1))
    erp = ErpContainer(data=src, chanlocs=(ChannelLocation("Cz"),), bindescr=("b",))
    with pytest.raises(ValueError):
        erp.data[0, 0, 0] = 1.0
    assert src.flags.writeable


def test_container_rejects_wrong_ndim():
    with pytest.raises(InvalidContainerError):
        ErpContainer(data=np.zeros((3, 100)), chanlocs=(), bindescr=())


def test_container_rejects_channel_and_bin_count_mismatch():
    with pytest.raises(InvalidContainerError):
        ErpContainer(data=np.zeros((2, 10, 1)), chanlocs=(ChannelLocation("Cz"),), bindescr=("b",))
    with pytest.raises(InvalidContainerError):
        ErpContainer(data=np.zeros((1, 10, 2)), chanlocs=(ChannelLocation("Cz"),), bindescr=("b",))


def test_empty_container_is_constructible():
    erp = ErpContainer(data=np.zeros((0, 0, 0)))
    assert erp.is_empty
    assert is_erp_container(erp)


def test_from_mapping_builds_container():
    erp = ErpContainer.from_mapping({
        "bindata": np.ones((2, 5, 1)),
        "chanlocs": [{"labels": "Fz"}, {"labels": "Cz"}],
        "bindescr": "target",
        "erpname": "S02",
        "srate": 500,
        "xmin": -0.1,
        "filename": "s02.erp",
        "filepath": "",
    })
    assert erp.labels == ("Fz", "Cz")
    assert erp.bindescr == ("target",)
    assert erp.srate == 500.0
    assert erp.filename == "s02.erp"
    assert erp.filepath is None


def test_from_mapping_requires_fields():
    with pytest.raises(InvalidContainerError):
        ErpContainer.from_mapping({"bindata": np.ones((1, 1, 1))})
    with pytest.raises(InvalidContainerError):
        ErpContainer.from_mapping([1, 2, 3])  # type: ignore[arg-type]


def test_is_erp_container_predicate():
    assert is_erp_container(_erp())
    assert not is_erp_container({"bindata": np.ones((1, 1, 1))})
    assert not is_erp_container(None)


def test_find_channel_index_exact_first_match():
    erp = _erp(n_ch=4, labels=["Fz", "Cz", "cz", "Cz"])
    assert find_channel_index(erp, "Cz") == 2
    assert find_channel_index(erp, "cz") == 3
    assert find_channel_index(erp, "Pz") is None


def _erplab_mapping(**fields):
    erp = {
        "bindata": np.ones((1, 5, 1)),
        "chanlocs": [{"labels": "Cz"}],
        "bindescr": ["target"],
    }
    erp.update(fields)
    return erp


def test_from_mapping_treats_empty_mat_fields_as_missing():
    erp = ErpContainer.from_mapping(_erplab_mapping(
        srate=np.array([]),
        xmin=np.array([]),
        erpname=np.array([]),
        filename=np.array([]),
        filepath=np.array(["/data/s01"]),
    ))
    assert erp.srate is None
    assert erp.xmin is None
    assert erp.erpname is None
    assert erp.filename is None
    assert erp.filepath == "/data/s01"


def test_from_mapping_unwraps_single_element_arrays():
    erp = ErpContainer.from_mapping(_erplab_mapping(srate=np.array([[250.0]]), xmin=np.array([-0.2])))
    assert erp.srate == 250.0
    assert erp.xmin == -0.2


def test_from_mapping_rejects_non_numeric_rate():
    with pytest.raises(InvalidContainerError):
        ErpContainer.from_mapping(_erplab_mapping(srate="fast"))
