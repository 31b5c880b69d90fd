import pytest

import numpy

from polysimp.core import numerical
from polysimp.core.numerical import EPSILON, Tolerant


@pytest.mark.numerical
def test_equality():
    """Values within relative epsilon are equal."""
    a = Tolerant(1.0)
    assert a == Tolerant(1.0 + EPSILON / 2.0)
    assert a == Tolerant(1.0 - EPSILON / 2.0)
    assert a == Tolerant(1.0 + EPSILON)
    assert a != Tolerant(1.0 + EPSILON * 2.0)
    assert a != Tolerant(1.0 - EPSILON * 2.0)
    assert Tolerant(0.0) == Tolerant(-0.0)
    assert Tolerant(numpy.nan) == Tolerant(numpy.nan)
    assert Tolerant(numpy.inf) == Tolerant(numpy.inf)
    assert Tolerant(numpy.inf) != Tolerant(-numpy.inf)
    assert Tolerant(1e300) != Tolerant(numpy.inf)


@pytest.mark.numerical
def test_compare_to_real():
    """Compare tolerant values to plain numbers."""
    assert Tolerant(1.0) == 1
    assert Tolerant(2.0) != 1
    assert Tolerant(1.0) < 2
    assert not Tolerant(2.0) < Tolerant(1.0)
    assert Tolerant(Tolerant(3.0)).value == 3.0
    assert float(Tolerant(3)) == 3.0
    assert Tolerant(1.0) != 'a'


@pytest.mark.numerical
def test_hash_consistency():
    """Nearby values find the same mapping entry."""
    mapping = {Tolerant(1.0): 'first'}
    assert mapping.get(Tolerant(1.0 + EPSILON / 2.0)) == 'first'
    assert mapping.get(Tolerant(1.0 + EPSILON * 2.0)) is None


@pytest.mark.numerical
def test_special_cases():
    """Signed zeros, NaN, and infinities are usable mapping keys."""
    mapping = {}
    mapping[Tolerant(0.0)] = 'zero'
    assert mapping.get(Tolerant(-0.0)) == 'zero'
    mapping[Tolerant(numpy.nan)] = 'nan'
    assert mapping.get(Tolerant(numpy.nan)) == 'nan'
    mapping[Tolerant(numpy.inf)] = 'inf'
    assert mapping.get(Tolerant(numpy.inf)) == 'inf'
    assert mapping.get(Tolerant(-numpy.inf)) != 'inf'


@pytest.mark.numerical
def test_root_values():
    """A root computed two ways is one key."""
    sqrt_2 = Tolerant(numpy.sqrt(2.0))
    pow_2 = Tolerant(2.0 ** 0.5)
    assert sqrt_2 == pow_2
    mapping = {sqrt_2: 'sqrt2'}
    assert mapping.get(pow_2) == 'sqrt2'


@pytest.mark.numerical
def test_format_number():
    """Format numbers without a redundant fractional part."""
    cases = {
        6.0: '6',
        -6.0: '-6',
        0.5: '0.5',
        -2.25: '-2.25',
        100.0: '100',
        1e21: '1000000000000000000000',
        numpy.inf: 'inf',
        -numpy.inf: '-inf',
        numpy.nan: 'NaN',
    }
    for value, expected in cases.items():
        assert numerical.format_number(value) == expected
    assert str(Tolerant(3.0)) == '3'
    assert repr(Tolerant(3.0)) == 'Tolerant(3.0)'


@pytest.mark.numerical
def test_signed_zero():
    """Store negative zero as zero."""
    assert str(Tolerant(-0.0)) == '0'
    assert not numpy.signbit(Tolerant(-0.0).value)
    assert hash(Tolerant(-0.0)) == hash(Tolerant(0.0))
