import logging
import typing

from polysimp.core import canonical
from polysimp.core import errors
from polysimp.core import lexer
from polysimp.core import numerical
from polysimp.core import parser
from polysimp.core import syntax


log = logging.getLogger(__name__)


class Interpreter:
    """A pipeline that rewrites polynomial text in canonical form.

    Each instance owns its lexer and parser. Neither holds state between
    calls, but callers that serve concurrent requests should still create one
    instance per request.
    """

    def __init__(
        self,
        symbols: typing.Iterable[str]=None,
        keywords: typing.Iterable[str]=None,
        joiner: str=' + ',
    ) -> None:
        """
        Initialize a new interpreter.

        Parameters
        ----------
        symbols : iterable of string, optional
            Characters that the lexer should treat as symbols.

        keywords : iterable of string, optional
            Identifiers that the lexer should flush as soon as they are
            complete.

        joiner : string, default=' + '
            The text to place between terms of the output.
        """
        self.lexer = lexer.Lexer(symbols=symbols, keywords=keywords)
        self.parser = parser.Parser()
        self.joiner = joiner

    def lex(self, text: str) -> lexer.Tokens:
        """Split `text` into tokens."""
        return self.lexer.lex(text)

    def parse(self, tokens: typing.Iterable[lexer.Token]) -> syntax.Expression:
        """Build a syntax tree from `tokens`."""
        return self.parser.parse(tokens)

    def interpret(self, tree: syntax.Node) -> str:
        """Produce the canonical text of a syntax tree.

        A bare number formats as itself. An expression without terms (i.e.,
        from empty input) produces an empty string.

        Raises
        ------
        `~errors.InterpretationError`
            The tree is neither a number nor an expression.
        """
        if isinstance(tree, syntax.Number):
            return numerical.format_number(tree.value)
        if isinstance(tree, syntax.Expression):
            if len(tree) == 0:
                return ''
            combined = canonical.combine(tree.terms)
            return canonical.render(combined, joiner=self.joiner)
        raise errors.InterpretationError("Invalid interpretation input")

    def simplify(self, text: str) -> str:
        """Lex, parse, and interpret `text`."""
        result = self.interpret(self.parse(self.lex(text)))
        log.debug("simplified %r to %r", text, result)
        return result


def simplify(text: str, **options) -> str:
    """Rewrite `text` in canonical form with a new interpreter.

    Parameters
    ----------
    text : string
        The polynomial to simplify, e.g. ``'200x + 100x^2 + 300'``.

    **options
        Keyword arguments to pass to `~interpreter.Interpreter`.

    Examples
    --------
    >>> simplify('200x + 100x^2 + 300')
    '100x^2 + 200x + 300'
    >>> simplify('2y^2 + 2y^2 + 2x^2')
    '2x^2 + 4y^2'
    """
    return Interpreter(**options).simplify(text)
