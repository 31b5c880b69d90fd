import typing

from polysimp.core import lexer
from polysimp.core import numerical


class InterpreterError(Exception):
    """Base class for exceptions encountered while simplifying input."""

    def __init__(self, message: typing.Any) -> None:
        self.message = str(message)

    def __str__(self) -> str:
        return f"InterpreterError: {self.message}"


class NumberTooLargeError(InterpreterError):
    """A numeral does not fit in a 64-bit float."""

    def __init__(self, accumulator: float, digit: float) -> None:
        super().__init__(
            f"Unsupported number: "
            f"{numerical.format_number(accumulator)}"
            f"{numerical.format_number(digit)}"
        )
        self.accumulator = accumulator
        self.digit = digit


class UnexpectedTokenError(InterpreterError):
    """The parser cannot start a term at the current token."""

    def __init__(self, token: typing.Any) -> None:
        if isinstance(token, lexer.Symbol) and token.is_term_symbol():
            super().__init__(f"Unsupported operator {token}")
        else:
            super().__init__(f"Unexpected token {token}")
        self.token = token


class InterpretationError(InterpreterError):
    """The syntax tree does not have a form the interpreter accepts."""
