import numpy as np
import pytest

from kqed.axis import construct_axis_kernel, kernel_on_axis
from kqed.axis_high import high_components
from kqed.axis_low import low_components
from kqed.stv import STV


def _random_tensors(seed: int):
    rng = np.random.default_rng(seed)
    return (
        rng.normal(size=(4, 4, 4)),
        rng.normal(size=(4, 4, 4)),
        rng.normal(size=(4, 4, 4)),
    )


@pytest.mark.parametrize("seed", [0, 1])
def test_construct_joins_both_halves(seed):
    vv, txv, tyv = _random_tensors(seed)
    stv = STV(vv=vv, txv=txv, tyv=tyv)
    kernel = construct_axis_kernel(stv)
    assert kernel.shape == (6, 4, 4, 4)
    np.testing.assert_allclose(kernel.ravel()[:192], low_components(stv))
    np.testing.assert_allclose(kernel.ravel()[192:], high_components(stv))


def test_zero_stv_gives_zero_kernel():
    kernel = construct_axis_kernel(STV.zeros())
    assert kernel.shape == (6, 4, 4, 4)
    assert float(np.abs(kernel).max()) == 0.0
    np.testing.assert_array_equal(kernel, np.zeros((6, 4, 4, 4)))


def test_single_vector_component_lands_in_rho_sigma_block():
    vv = np.zeros((4, 4, 4))
    vv.flat[44] = 1.0
    kernel = construct_axis_kernel(STV(vv=vv))
    # flat entry 320 is v44 - v56, i.e. kernel[5][0][0][0]
    assert kernel[5, 0, 0, 0] == 1.0


@pytest.mark.parametrize("seed", [2, 3])
def test_kernel_on_axis_matches_direct_construction(seed):
    vv, txv, tyv = _random_tensors(seed)
    calls = []

    def tabd(q, grid):
        calls.append((q.copy(), grid))
        return vv, txv, tyv

    grid = object()
    result = kernel_on_axis([0.1, 0.2, 0.3, 0.4], grid, tabd)
    expected = construct_axis_kernel(STV(vv=vv, txv=txv, tyv=tyv))
    np.testing.assert_allclose(result, expected)
    assert len(calls) == 1
    np.testing.assert_allclose(calls[0][0], [0.1, 0.2, 0.3, 0.4])
    assert calls[0][1] is grid


def test_kernel_on_axis_propagates_tabd_failure():
    def tabd(q, grid):
        raise ValueError("beyond the grid")

    with pytest.raises(ValueError, match="beyond the grid"):
        kernel_on_axis([1.0, 0.0, 0.0, 0.0], None, tabd)


def test_kernel_on_axis_rejects_bad_vector():
    def tabd(q, grid):
        return np.zeros((4, 4, 4)), np.zeros((4, 4, 4)), np.zeros((4, 4, 4))

    with pytest.raises(ValueError):
        kernel_on_axis([1.0, 2.0, 3.0], None, tabd)


def test_kernel_on_axis_rejects_bad_tensor_shape():
    def tabd(q, grid):
        return np.zeros((4, 4)), np.zeros((4, 4, 4)), np.zeros((4, 4, 4))

    with pytest.raises(ValueError):
        kernel_on_axis([1.0, 0.0, 0.0, 0.0], None, tabd)