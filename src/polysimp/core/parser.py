import collections
import logging
import typing

from polysimp.core import errors
from polysimp.core import lexer
from polysimp.core import numerical
from polysimp.core import syntax


log = logging.getLogger(__name__)


class Parser:
    """A tool for parsing tokens into a sum of terms."""

    def __init__(
        self,
        plus: str='+',
        minus: str='-',
        raising: str='^',
    ) -> None:
        """
        Initialize a parser with fixed tokens.

        Parameters
        ----------
        plus : string, default='+'
            The symbol that represents addition or a positive sign.

        minus : string, default='-'
            The symbol that represents subtraction or a negative sign.

        raising : string, default='^'
            The symbol that represents raising to a power (exponentiation).
        """
        self.plus = lexer.Symbol(plus)
        self.minus = lexer.Symbol(minus)
        self.raising = lexer.Symbol(raising)

    def parse(self, tokens: typing.Iterable[lexer.Token]) -> syntax.Expression:
        """Parse all of `tokens` into an expression.

        This method consumes the full token queue, one term at a time. An empty
        queue produces an expression with no terms.
        """
        if not isinstance(tokens, collections.deque):
            tokens = collections.deque(tokens)
        terms = []
        while tokens:
            terms.append(self.parse_term(tokens))
        log.debug("parsed terms %s", terms)
        return syntax.Expression(terms)

    def parse_term(self, tokens: lexer.Tokens) -> syntax.Term:
        """Parse a single term from the front of `tokens`.

        A term has the form ``[sign...][digits][identifier[^exponent]]``. When
        the term contains variables but no digits, its coefficient is an
        implicit 1 with the parsed sign, so that ``x`` means ``1x`` and ``-x``
        means ``-1x``, while ``0x`` keeps its explicit zero.

        A trailing ``+`` separator belongs to this term. A trailing ``-`` stays
        in the queue as the sign of the next term, so ``a - b`` and ``a + -b``
        parse identically.
        """
        before = len(tokens)
        sign = self.parse_sign(tokens)
        value, ndigits = self.parse_digits(tokens)
        variables = self.parse_variables(tokens)
        if tokens and tokens[0] == self.plus:
            tokens.popleft()
        if len(tokens) == before:
            raise errors.UnexpectedTokenError(tokens[0])
        if variables and ndigits == 0:
            value = 1.0
        return syntax.Term(syntax.Number(sign * value), variables)

    def parse_sign(self, tokens: lexer.Tokens) -> float:
        """Fold a run of leading signs into +1 or -1.

        Each minus sign flips the result and each plus sign leaves it alone.
        """
        sign = 1.0
        while tokens and tokens[0] in (self.plus, self.minus):
            if tokens.popleft() == self.minus:
                sign = -sign
        return sign

    def parse_digits(self, tokens: lexer.Tokens) -> typing.Tuple[float, int]:
        """Merge a run of digit tokens into one number.

        Returns
        -------
        tuple of (float, int)
            The accumulated value and the number of digits consumed.

        Raises
        ------
        `~errors.NumberTooLargeError`
            The next digit would push the value beyond the largest float.
        """
        accumulator = 0.0
        ndigits = 0
        while tokens and isinstance(tokens[0], lexer.Number):
            digit = tokens[0].value
            if accumulator >= numerical.LARGEST / 10.0:
                raise errors.NumberTooLargeError(accumulator, digit)
            accumulator = accumulator * 10.0 + digit
            tokens.popleft()
            ndigits += 1
        return accumulator, ndigits

    def parse_constant(self, tokens: lexer.Tokens) -> syntax.Number:
        """Parse a signed numeral, which may have no digits (i.e., zero)."""
        sign = self.parse_sign(tokens)
        value, _ = self.parse_digits(tokens)
        return syntax.Number(sign * value)

    def parse_variables(
        self,
        tokens: lexer.Tokens,
    ) -> typing.List[syntax.Variable]:
        """Parse an optional identifier into variables.

        Every character of the identifier is a separate variable. All but the
        last have unit exponent; the last takes the optional exponent that
        follows the identifier. For example, ``xy^2`` becomes ``x^1 y^2``.
        """
        if not (tokens and isinstance(tokens[0], lexer.Identifier)):
            return []
        name = tokens.popleft().value
        variables = [syntax.Variable(c) for c in name[:-1]]
        exponent = self.parse_exponent(tokens)
        variables.append(syntax.Variable(name[-1], exponent))
        return variables

    def parse_exponent(self, tokens: lexer.Tokens) -> syntax.Number:
        """Parse an optional exponent, which defaults to 1."""
        if tokens and tokens[0] == self.raising:
            tokens.popleft()
            return self.parse_constant(tokens)
        return syntax.Number(1.0)
