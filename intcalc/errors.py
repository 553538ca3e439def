from typing import Optional

from intcalc.helper import error_message, display_char
from intcalc.token import Token, TokenKind


class CalcError(Exception):
    """Base class for every failure raised while evaluating one line."""

    def __init__(self, expression: str, location: int, message: str) -> None:
        super().__init__(message)
        self.expression = expression
        self.location = location
        self.message = message

    def render(self) -> str:
        return error_message(self.expression, self.location, self.message)


class LexicalError(CalcError):
    def __init__(
        self, expression: str, location: int, message: Optional[str] = None
    ) -> None:
        self.character = expression[location] if location < len(expression) else ""
        if message is None:
            character = display_char(self.character)
            message = f"invalid character '{character}' at position {location}"
        super().__init__(expression, location, message)


class CalcSyntaxError(CalcError):
    """The lookahead token is not the one the grammar requires here."""

    def __init__(self, expression: str, expected: TokenKind, found: Token) -> None:
        self.expected = expected
        self.found = found
        message = f"expected {expected.display_name}, found {found.kind.display_name}"
        super().__init__(expression, found.location, message)


class EvaluationError(CalcError):
    """A well formed expression that integer arithmetic cannot evaluate."""

    def __init__(
        self, expression: str, operator: Token, dividend: int, divisor_text: str
    ) -> None:
        self.operator = operator
        self.dividend = dividend
        self.divisor_text = divisor_text
        message = f"division by zero: {dividend} / {divisor_text}"
        super().__init__(expression, operator.location, message)


class NestingError(CalcError):
    """Parentheses nested deeper than the evaluator's recursion allows."""

    def __init__(self, expression: str, found: Token, limit: int) -> None:
        self.found = found
        self.limit = limit
        message = f"parentheses nested deeper than {limit} levels"
        super().__init__(expression, found.location, message)
