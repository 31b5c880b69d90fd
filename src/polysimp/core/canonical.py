import collections.abc
import functools
import logging
import typing

from polysimp.core import numerical
from polysimp.core import syntax


log = logging.getLogger(__name__)


class Factor(typing.NamedTuple):
    """A variable name and its exponent within a monomial."""

    name: str
    exponent: numerical.Tolerant

    def format(self) -> str:
        """Format this factor for printing."""
        if self.exponent == 1:
            return self.name
        return f"{self.name}^{self.exponent}"


Signature = typing.Tuple[Factor, ...]
"""The sorted factors that identify a family of like terms.

Two signatures are the same key if they have the same length and their
factors have equal names and tolerantly equal exponents, position by position.
The empty signature identifies constants.
"""


def signature(variables: typing.Iterable[syntax.Variable]) -> Signature:
    """Create the signature of a product of variables.

    Factors sort by name, then by ascending exponent. Repeated names are not
    merged, so ``xx`` has a different signature from ``x^2``.
    """
    factors = [
        Factor(variable.name, numerical.Tolerant(_value_of(variable.exponent)))
        for variable in variables
    ]
    return tuple(sorted(factors, key=lambda f: (f.name, f.exponent.value)))


def _value_of(node: syntax.Node, default: float=0.0) -> float:
    """The value of a number node, or `default` for any other node."""
    if isinstance(node, syntax.Number):
        return node.value
    return default


def _compare(a: Signature, b: Signature) -> int:
    """Order signatures for display.

    Constants come last. Otherwise, compare factors pairwise by ascending name
    and then by descending exponent. If one signature is a prefix of the other,
    the shorter one comes first.
    """
    if not a or not b:
        return len(b) - len(a)
    for fa, fb in zip(a, b):
        if fa.name != fb.name:
            return -1 if fa.name < fb.name else 1
        if fa.exponent != fb.exponent:
            return -1 if fb.exponent < fa.exponent else 1
    return len(a) - len(b)


class CanonicalExpression(collections.abc.Mapping):
    """A mapping from monomial signature to combined coefficient.

    Instances do not store zero coefficients. Adding a zero coefficient has no
    effect, and an entry whose coefficient cancels to zero disappears.

    Lookup groups signatures by their variable names, which must match
    exactly, and then compares exponents with `~numerical.Tolerant` equality.
    A key therefore finds every stored signature that compares equal to it,
    even when the two hash differently.
    """

    def __init__(self) -> None:
        self._terms: typing.Dict[Signature, float] = {}
        self._groups: typing.Dict[
            typing.Tuple[str, ...],
            typing.List[Signature],
        ] = {}
        self._variables: typing.Set[str] = set()

    def _resolve(self, key: Signature) -> Signature:
        """The stored signature equal to `key`, or `key` if there is none."""
        key = tuple(key)
        names = tuple(factor.name for factor in key)
        for stored in self._groups.get(names, ()):
            if stored == key:
                return stored
        return key

    def add_term(self, key: Signature, coefficient: float) -> None:
        """Add `coefficient` to the entry for `key`, creating it if needed."""
        if coefficient == 0.0:
            return
        key = self._resolve(key)
        self._variables.update(factor.name for factor in key)
        names = tuple(factor.name for factor in key)
        if key not in self._terms:
            self._terms[key] = coefficient
            self._groups.setdefault(names, []).append(key)
            return
        total = self._terms[key] + coefficient
        if total == 0.0:
            del self._terms[key]
            self._groups[names].remove(key)
            if not self._groups[names]:
                del self._groups[names]
        else:
            self._terms[key] = total

    def get_term(self, key: Signature) -> typing.Optional[float]:
        """The coefficient for `key`, if present."""
        return self._terms.get(self._resolve(key))

    @property
    def variables(self) -> typing.FrozenSet[str]:
        """The name of every variable added to this expression."""
        return frozenset(self._variables)

    def signatures(self) -> typing.List[Signature]:
        """All signatures in display order."""
        return sorted(self._terms, key=functools.cmp_to_key(_compare))

    def __getitem__(self, key: Signature) -> float:
        return self._terms[self._resolve(key)]

    def __iter__(self) -> typing.Iterator[Signature]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self._terms!r})"


def combine(terms: typing.Iterable[syntax.Node]) -> CanonicalExpression:
    """Combine like terms.

    Terms with the same signature contribute to one coefficient. For example,
    ``2x^2 + 2x^2`` becomes ``4x^2``. Terms without variables add up to a
    single constant.
    """
    expression = CanonicalExpression()
    for term in terms:
        if not isinstance(term, syntax.Term):
            continue
        coefficient = _value_of(term.coefficient)
        expression.add_term(signature(term.variables), coefficient)
    log.debug("combined terms into %r", expression)
    return expression


def render(
    expression: typing.Mapping[Signature, float],
    joiner: str=' + ',
) -> str:
    """Format a canonical expression as text.

    Terms appear in the order of `CanonicalExpression.signatures`. A unit
    coefficient is implicit on a term with variables, and a unit exponent is
    implicit on every factor. Negative coefficients keep their sign in place
    (e.g., ``x + -3``). An expression without any nonzero term is ``0``.
    """
    keys = sorted(expression, key=functools.cmp_to_key(_compare))
    if all(expression[key] == 0.0 for key in keys):
        return '0'
    formatted = []
    for key in keys:
        coefficient = expression[key]
        string = ''
        if not key or numerical.Tolerant(coefficient) != 1:
            string = numerical.format_number(coefficient)
        string += ''.join(factor.format() for factor in key)
        formatted.append(string)
    return joiner.join(formatted)
