import numbers
import typing

import numpy


EPSILON = float(numpy.finfo(float).eps)
"""The difference between 1.0 and the next representable float."""

LARGEST = float(numpy.finfo(float).max)
"""The largest representable float."""


class Tolerant:
    """A real number that compares equal to nearby values.

    Two instances are equal if their values are identical, if both are NaN, or
    if their relative difference is smaller than machine epsilon. A value equal
    to zero instead compares by absolute difference. Negative zero is stored as
    zero, so it formats like zero. Instances hash by value after rounding to
    the nearest multiple of machine epsilon, so most approximately equal values
    land in the same bucket of a `dict` or `set`. Lookups that must agree with
    equality should not rely on the hash alone (see
    `~canonical.CanonicalExpression`).

    Examples
    --------
    The square root of 2 and 2 raised to one half may differ in their last bit,
    but they are equal as tolerant values:

    >>> Tolerant(numpy.sqrt(2)) == Tolerant(2 ** 0.5)
    True
    """

    __slots__ = ('value',)

    def __init__(self, value: typing.SupportsFloat) -> None:
        if isinstance(value, Tolerant):
            value = value.value
        self.value = float(value) + 0.0
        """The wrapped value."""

    def normalized(self) -> float:
        """The value rounded to the nearest multiple of machine epsilon."""
        with numpy.errstate(all='ignore'):
            scaled = numpy.rint(numpy.float64(self.value) / EPSILON)
            return float(scaled * EPSILON)

    def approx_eq(self, other: typing.SupportsFloat) -> bool:
        """True if `other` is equal to this value within tolerance."""
        a = self.value
        b = float(other)
        if a == b:
            return True
        if numpy.isnan(a) and numpy.isnan(b):
            return True
        diff = abs(a - b)
        if a == 0.0 or b == 0.0:
            return diff < EPSILON
        with numpy.errstate(all='ignore'):
            return bool(diff / max(abs(a), abs(b)) < EPSILON)

    def __eq__(self, other) -> bool:
        """True if two values are approximately equal."""
        if isinstance(other, (Tolerant, numbers.Real)):
            return self.approx_eq(other)
        return NotImplemented

    def __hash__(self) -> int:
        """Compute instance hash (e.g., for use as `dict` key)."""
        normalized = self.normalized()
        if normalized == 0.0:
            return hash(0.0)
        if numpy.isnan(normalized):
            return hash('nan')
        return hash(normalized)

    def __lt__(self, other) -> bool:
        """Order by raw value."""
        if isinstance(other, (Tolerant, numbers.Real)):
            return self.value < float(other)
        return NotImplemented

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return format_number(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.value!r})"


def format_number(value: typing.SupportsFloat) -> str:
    """Format a real number without a redundant fractional part.

    Integral values lose their trailing ``.0`` and very large or very small
    values are written out in positional notation, using the fewest digits
    that uniquely identify the value.

    >>> format_number(6.0)
    '6'
    >>> format_number(0.5)
    '0.5'
    >>> format_number(1e21)
    '1000000000000000000000'
    """
    value = float(value)
    if numpy.isnan(value):
        return 'NaN'
    if numpy.isinf(value):
        return 'inf' if value > 0 else '-inf'
    return numpy.format_float_positional(value, trim='-')
