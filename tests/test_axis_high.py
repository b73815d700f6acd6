import numpy as np
import pytest

from kqed.axis_high import high_components
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


def test_zero_input_gives_zero_output():
    out = high_components(STV.zeros())
    assert out.shape == (192,)
    assert np.all(out == 0.0)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_scalar_parts_do_not_enter(seed):
    stv = _random_stv(seed)
    without_scalars = STV(txv=stv.txv, tyv=stv.tyv, vv=stv.vv)
    np.testing.assert_allclose(high_components(stv), high_components(without_scalars))


@pytest.mark.parametrize("seed", [3, 4])
def test_linear_in_inputs(seed):
    a = _random_stv(seed)
    b = _random_stv(seed + 10)
    combined = STV(
        txv=2.0 * a.txv - b.txv,
        tyv=2.0 * a.tyv - b.tyv,
        vv=2.0 * a.vv - b.vv,
    )
    expected = 2.0 * high_components(a) - high_components(b)
    np.testing.assert_allclose(high_components(combined), expected, atol=1e-12)


@pytest.mark.parametrize("seed", [5, 6, 7])
def test_pure_vector_entries_repeat(seed):
    out = high_components(_random_stv(seed))
    # entries 192, 207, 252 and -243 are all v24 - v36
    assert out[0] == pytest.approx(out[15])
    assert out[0] == pytest.approx(out[60])
    assert out[0] == pytest.approx(-out[51])
    # entries 195, 240, 255 and -204 are all v27 - v39
    assert out[3] == pytest.approx(out[48])
    assert out[3] == pytest.approx(out[63])
    assert out[3] == pytest.approx(-out[12])
    # entries 320, 325, 340 and -337 are all v44 - v56
    assert out[128] == pytest.approx(out[133])
    assert out[128] == pytest.approx(out[148])
    assert out[128] == pytest.approx(-out[145])


def test_single_vector_component():
    vv = np.zeros((4, 4, 4))
    vv.flat[24] = 1.0
    out = high_components(STV(vv=vv))
    assert out[0] == 1.0
    assert out[51] == -1.0
    assert out[5] == 1.0