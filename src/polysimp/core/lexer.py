import collections
import logging
import typing


log = logging.getLogger(__name__)


SYMBOLS = frozenset('+-*/()^=|')
"""Characters that always form a single-character token."""

KEYWORDS = frozenset(('abs', 'sqrt', 'pow', 'pi', 'e'))
"""Identifiers that end as soon as they are complete."""


class Token:
    """Base class for lexical tokens."""

    __slots__ = ('value',)

    def __init__(self, value) -> None:
        self.value = value

    def __eq__(self, other) -> bool:
        """True if two tokens have the same type and value."""
        if not isinstance(other, Token):
            return NotImplemented
        return type(other) is type(self) and other.value == self.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.value!r})"


class Number(Token):
    """A single decimal digit."""

    def __init__(self, value: float) -> None:
        super().__init__(float(value))


class Identifier(Token):
    """A run of characters that are neither digits nor symbols."""

    def __init__(self, value: str) -> None:
        super().__init__(str(value))


class Symbol(Token):
    """A single operator or grouping character."""

    def __init__(self, value: str) -> None:
        super().__init__(str(value))

    def is_term_symbol(self) -> bool:
        """True if this symbol can join two terms."""
        return self.value in {'+', '-', '*', '/'}


Tokens = typing.Deque[Token]


class Lexer:
    """A tool for splitting text into tokens."""

    def __init__(
        self,
        symbols: typing.Iterable[str]=None,
        keywords: typing.Iterable[str]=None,
    ) -> None:
        """
        Initialize a lexer with fixed symbols and keywords.

        Parameters
        ----------
        symbols : iterable of string, optional
            The characters to treat as symbol tokens. Defaults to `SYMBOLS`.

        keywords : iterable of string, optional
            The identifiers to flush as soon as they are complete. Defaults to
            `KEYWORDS`.
        """
        self._symbols = SYMBOLS if symbols is None else frozenset(symbols)
        self._keywords = KEYWORDS if keywords is None else frozenset(keywords)

    @property
    def symbols(self) -> typing.FrozenSet[str]:
        """The characters that form symbol tokens."""
        return self._symbols

    @property
    def keywords(self) -> typing.FrozenSet[str]:
        """The recognized keyword identifiers."""
        return self._keywords

    def lex(self, text: str) -> Tokens:
        """Convert `text` into a queue of tokens.

        Whitespace separates nothing and disappears. Every symbol and every
        decimal digit becomes its own token. All other characters accumulate
        into an identifier, which ends at the next digit or symbol, or after it
        spells a keyword.
        """
        tokens = collections.deque()
        current = ''
        for c in text:
            if c.isspace():
                continue
            if c in self._symbols or c.isdecimal():
                if current:
                    tokens.append(Identifier(current))
                    current = ''
                if c in self._symbols:
                    tokens.append(Symbol(c))
                else:
                    tokens.append(Number(int(c)))
                continue
            if current in self._keywords:
                tokens.append(Identifier(current))
                current = ''
            current += c
        if current:
            tokens.append(Identifier(current))
        log.debug("lexed %r into %s", text, list(tokens))
        return tokens
