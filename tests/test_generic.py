import numpy as np
import pytest

from kqed.generic import construct_kernel
from kqed.generic_high import high_components
from kqed.generic_low import low_components
from kqed.stv import STV


def _random_stv(seed: int) -> STV:
    rng = np.random.default_rng(seed)
    return STV(
        sxv=rng.normal(size=4),
        syv=rng.normal(size=4),
        txv=rng.normal(size=(4, 4, 4)),
        tyv=rng.normal(size=(4, 4, 4)),
        vv=rng.normal(size=(4, 4, 4)),
    )


def test_shape_and_halves():
    stv = _random_stv(5)
    kernel = construct_kernel(stv)
    assert kernel.shape == (6, 4, 4, 4)
    flat = kernel.ravel()
    np.testing.assert_array_equal(flat[:192], low_components(stv))
    np.testing.assert_array_equal(flat[192:], high_components(stv))


def test_zero_stv_gives_zero_kernel():
    kernel = construct_kernel(STV.zeros())
    assert kernel.shape == (6, 4, 4, 4)
    assert float(np.abs(kernel).max()) == 0.0
    np.testing.assert_array_equal(kernel, np.zeros((6, 4, 4, 4)))


@pytest.mark.parametrize("factor", [-2.0, 0.5, 3.0])
def test_scales_linearly(factor):
    stv = _random_stv(9)
    scaled = STV(
        sxv=factor * stv.sxv,
        syv=factor * stv.syv,
        txv=factor * stv.txv,
        tyv=factor * stv.tyv,
        vv=factor * stv.vv,
    )
    np.testing.assert_allclose(
        construct_kernel(scaled), factor * construct_kernel(stv), rtol=1e-12, atol=1e-12
    )


def test_tied_entries_in_index_form():
    kernel = construct_kernel(_random_stv(21))
    assert kernel[0, 2, 2, 2] == pytest.approx(kernel[0, 2, 3, 3])
    assert kernel[0, 2, 2, 2] == pytest.approx(kernel[0, 3, 3, 2])
    assert kernel[3, 0, 0, 0] == pytest.approx(kernel[3, 0, 3, 3])
    assert kernel[3, 3, 0, 3] == pytest.approx(-kernel[3, 0, 0, 0])


def test_single_vector_component_reaches_first_entry():
    vv = np.zeros((4, 4, 4))
    vv.flat[26] = 1.0
    kernel = construct_kernel(STV(vv=vv))
    assert kernel[0, 0, 0, 0] == 1.0
    assert kernel[0, 0, 0, 1] == 0.0