from dataclasses import dataclass
from typing import Optional

from intcalc.errors import CalcError


@dataclass(frozen=True)
class Evaluation:
    """Outcome of evaluating one line: either a value or the first error."""

    expression: str
    value: Optional[int] = None
    error: Optional[CalcError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("evaluation needs exactly one of value or error")

    @classmethod
    def success(cls, expression: str, value: int) -> "Evaluation":
        return cls(expression, value, None)

    @classmethod
    def failure(cls, expression: str, error: CalcError) -> "Evaluation":
        return cls(expression, None, error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> int:
        if self.error is not None:
            raise self.error
        return self.value
