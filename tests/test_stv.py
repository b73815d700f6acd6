import numpy as np
import pytest

from kqed.stv import STV


def test_zeros_has_all_components_zero():
    stv = STV.zeros()
    assert stv.sxv.shape == (4,)
    assert stv.vv.shape == (4, 4, 4)
    assert not stv.sxv.any()
    assert not stv.syv.any()
    assert not stv.txv.any()
    assert not stv.tyv.any()
    assert not stv.vv.any()


def test_zeros_instances_do_not_share_storage():
    a = STV.zeros()
    b = STV.zeros()
    a.vv[0, 0, 0] = 1.0
    assert b.vv[0, 0, 0] == 0.0


def test_flat_uses_row_major_order():
    vv = np.zeros((4, 4, 4))
    vv[1, 2, 3] = 7.0
    stv = STV(vv=vv)
    flat = stv.flat()
    assert len(flat.vv) == 64
    assert flat.vv[16 * 1 + 4 * 2 + 3] == 7.0
    assert sum(flat.vv) == 7.0


def test_flat_round_trips_all_components():
    rng = np.random.default_rng(1)
    stv = STV(
        sxv=rng.normal(size=4),
        syv=rng.normal(size=4),
        txv=rng.normal(size=(4, 4, 4)),
        tyv=rng.normal(size=(4, 4, 4)),
        vv=rng.normal(size=(4, 4, 4)),
    )
    flat = stv.flat()
    np.testing.assert_array_equal(np.array(flat.txv).reshape(4, 4, 4), stv.txv)
    np.testing.assert_array_equal(np.array(flat.tyv).reshape(4, 4, 4), stv.tyv)
    np.testing.assert_array_equal(np.array(flat.vv).reshape(4, 4, 4), stv.vv)
    np.testing.assert_array_equal(np.array(flat.sxv), stv.sxv)
    np.testing.assert_array_equal(np.array(flat.syv), stv.syv)


def test_input_lists_are_converted_to_arrays():
    stv = STV(sxv=[1, 2, 3, 4])
    assert stv.sxv.dtype == float
    np.testing.assert_array_equal(stv.sxv, [1.0, 2.0, 3.0, 4.0])


def test_input_is_copied():
    source = np.ones(4)
    stv = STV(syv=source)
    source[0] = 5.0
    assert stv.syv[0] == 1.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"sxv": np.zeros(3)},
        {"syv": np.zeros((4, 4))},
        {"txv": np.zeros((4, 4))},
        {"tyv": np.zeros(64)},
        {"vv": np.zeros((4, 4, 5))},
    ],
)
def test_wrong_shapes_are_rejected(kwargs):
    with pytest.raises(ValueError):
        STV(**kwargs)