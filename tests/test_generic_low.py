import numpy as np

from kqed.generic_low import low_components
from kqed.stv import STV


def _random_stv(seed):
    rng = np.random.default_rng(seed)
    return STV(
        sxv=rng.normal(size=4),
        syv=rng.normal(size=4),
        txv=rng.normal(size=(4, 4, 4)),
        tyv=rng.normal(size=(4, 4, 4)),
        vv=rng.normal(size=(4, 4, 4)),
    )


def _add(a, b):
    return STV(
        sxv=a.sxv + b.sxv,
        syv=a.syv + b.syv,
        txv=a.txv + b.txv,
        tyv=a.tyv + b.tyv,
        vv=a.vv + b.vv,
    )


def test_zero_input_gives_zero_components():
    out = low_components(STV.zeros())
    assert out.shape == (192,)
    assert not out.any()


def test_linearity():
    a = _random_stv(3)
    b = _random_stv(4)
    np.testing.assert_allclose(
        low_components(_add(a, b)), low_components(a) + low_components(b), atol=1e-12
    )


def test_first_entry_from_vector_term():
    vv = np.zeros(64)
    vv[26] = 1.0
    out = low_components(STV(vv=vv.reshape(4, 4, 4)))
    assert out[0] == 1.0
    vv[26] = 0.0
    vv[38] = 1.0
    out = low_components(STV(vv=vv.reshape(4, 4, 4)))
    assert out[0] == -1.0


def test_pure_vector_entries_agree():
    out = low_components(_random_stv(7))
    assert out[42] == out[47] == out[62]
    assert out[59] == -out[42]
    assert out[43] == out[58] == out[63]
    assert out[46] == -out[43]
    assert out[149] == out[154] == out[169]
    assert out[166] == -out[149]
    assert out[150] == out[165] == out[170]
    assert out[153] == -out[150]


def test_pure_vector_entries_ignore_tensor_and_scalar_terms():
    base = _random_stv(11)
    other = STV(
        sxv=base.sxv + 1.0,
        syv=base.syv - 2.0,
        txv=base.txv * 3.0,
        tyv=base.tyv + 0.5,
        vv=base.vv,
    )
    a = low_components(base)
    b = low_components(other)
    for index in (0, 21, 42, 43, 64, 85, 106, 128, 191):
        assert a[index] == b[index]


def test_only_tensor_terms_leave_pure_vector_entries_zero():
    rng = np.random.default_rng(5)
    stv = STV(txv=rng.normal(size=(4, 4, 4)), tyv=rng.normal(size=(4, 4, 4)))
    out = low_components(stv)
    for index in (0, 21, 42, 64, 128, 191):
        assert out[index] == 0.0
    assert np.abs(out).sum() > 0.0


def test_scalar_terms_enter_only_through_their_sum_and_sxv():
    # with syv = -sxv the combined scalar term vanishes
    rng = np.random.default_rng(9)
    sx = rng.normal(size=4)
    with_scalars = low_components(STV(sxv=sx, syv=-sx))
    only_sx = low_components(STV(sxv=sx))
    only_sy = low_components(STV(syv=-sx))
    np.testing.assert_allclose(only_sx + only_sy, with_scalars, atol=1e-12)
    assert np.abs(with_scalars).sum() > 0.0