import numpy as np
import pytest

from kqed.generic_high import high_components
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


def test_zero_stv_gives_zero_entries():
    out = high_components(STV.zeros())
    assert out.shape == (192,)
    assert np.all(out == 0.0)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_linear_in_stv(seed):
    a = _random_stv(seed)
    b = _random_stv(seed + 100)
    total = STV(
        sxv=a.sxv + b.sxv,
        syv=a.syv + b.syv,
        txv=a.txv + b.txv,
        tyv=a.tyv + b.tyv,
        vv=a.vv + b.vv,
    )
    np.testing.assert_allclose(
        high_components(total),
        high_components(a) + high_components(b),
        rtol=1e-12,
        atol=1e-12,
    )


@pytest.mark.parametrize(
    "same, negated",
    [
        ((0, 15, 60), 51),
        ((3, 48, 63), 12),
        ((64, 74, 104), 98),
        ((66, 96, 106), 72),
        ((128, 133, 148), 145),
        ((129, 144, 149), 132),
    ],
)
def test_pure_vector_entries_are_tied(same, negated):
    out = high_components(_random_stv(7))
    first = out[same[0]]
    for idx in same[1:]:
        assert out[idx] == pytest.approx(first)
    assert out[negated] == pytest.approx(-first)


def test_pure_vector_entries_ignore_scalar_and_tensor_terms():
    base = _random_stv(11)
    other = _random_stv(12)
    mixed = STV(sxv=other.sxv, syv=other.syv, txv=other.txv, tyv=other.tyv, vv=base.vv)
    a = high_components(base)
    b = high_components(mixed)
    for idx in (0, 3, 12, 15, 42, 48, 51, 60, 63, 64, 191):
        assert a[idx] == pytest.approx(b[idx])


def test_single_vector_component():
    vv = np.zeros((4, 4, 4))
    vv.flat[24] = 1.0
    out = high_components(STV(vv=vv))
    assert out[0] == 1.0
    assert out[51] == -1.0


def test_scalar_terms_enter_entries():
    base = STV.zeros()
    shifted = STV(syv=[0.0, 0.0, 1.0, 0.0])
    assert high_components(base)[1] != high_components(shifted)[1]
    assert high_components(shifted)[0] == 0.0