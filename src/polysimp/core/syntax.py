"""
Nodes of the syntax tree that the parser builds.

The tree for a whole input is always an `Expression` of `Term` nodes. Each
term holds a `Number` coefficient and zero or more `Variable` factors, and
each variable holds a `Number` exponent. Exponents are resolved to numbers at
parse time, so there are no symbolic exponents.
"""

import typing


class Node:
    """Base class for syntax-tree nodes."""

    __slots__ = ()

    def _key(self) -> tuple:
        raise NotImplementedError

    def __eq__(self, other) -> bool:
        """True if two nodes have the same type and contents."""
        if not isinstance(other, Node):
            return NotImplemented
        return type(other) is type(self) and other._key() == self._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))

    def __repr__(self) -> str:
        args = ', '.join(repr(k) for k in self._key())
        return f"{self.__class__.__qualname__}({args})"


class Number(Node):
    """A numerical literal."""

    __slots__ = ('value',)

    def __init__(self, value: typing.SupportsFloat) -> None:
        self.value = float(value)

    def _key(self):
        return (self.value,)


class Variable(Node):
    """A named variable raised to a numerical exponent."""

    __slots__ = ('name', 'exponent')

    def __init__(self, name: str, exponent: Node=None) -> None:
        self.name = name
        self.exponent = Number(1.0) if exponent is None else exponent

    def _key(self):
        return (self.name, self.exponent)


class Term(Node):
    """The product of a coefficient and zero or more variables."""

    __slots__ = ('coefficient', 'variables')

    def __init__(
        self,
        coefficient: Node,
        variables: typing.Iterable[Variable]=(),
    ) -> None:
        self.coefficient = coefficient
        self.variables = tuple(variables)

    def _key(self):
        return (self.coefficient, self.variables)


class Expression(Node):
    """The sum of zero or more terms."""

    __slots__ = ('terms',)

    def __init__(self, terms: typing.Iterable[Term]=()) -> None:
        self.terms = tuple(terms)

    def __iter__(self) -> typing.Iterator[Term]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def _key(self):
        return (self.terms,)
