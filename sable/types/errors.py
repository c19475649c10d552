"""Errors and failure results.

The environment API and the form handlers speak in ``SableError`` exceptions.
The two public entry points, ``read`` and ``evaluate``, never let one escape:
they hand back a ``ParseFailure`` or an ``EvalFailure`` value instead, and the
caller decides whether to report and continue or to raise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from sable.types.values import Value


class SableError(Exception):
    """ Base class for all Sable errors"""

    kind: ClassVar[str] = "error"

    def failure(self) -> EvalFailure:
        return EvalFailure(self.kind, str(self))


class SableInvalidSymbol(SableError):
    """ Raised when a non-symbol is used where a name is required"""

    kind = "invalid-symbol"


class SableUnboundSymbol(SableError):
    """ Raised when a symbol is used before it is bound"""

    kind = "unbound-variable"


class SableArityError(SableError):
    """ Raised when a form receives the wrong number of operands"""

    kind = "arity"


class SableBadForm(SableError):
    """ Raised when a form is structurally invalid"""

    kind = "bad-form"


class SableSyntaxError(SableError):
    """ Raised from a ParseFailure by callers that prefer exceptions"""

    kind = "syntax"

    def __init__(self, message: str, position: int = 0):
        super().__init__(message)
        self.position = position


_ERRORS_BY_KIND: dict[str, type[SableError]] = {
    cls.kind: cls
    for cls in (SableInvalidSymbol, SableUnboundSymbol, SableArityError, SableBadForm)
}


@dataclass(frozen=True)
class ParseFailure:
    """Why and where the reader gave up on a datum."""

    position: int
    message: str
    text: str = field(default="", repr=False, compare=False)

    ok: ClassVar[bool] = False

    @property
    def line(self) -> int:
        return self.text.count("\n", 0, self.position) + 1

    @property
    def column(self) -> int:
        return self.position - (self.text.rfind("\n", 0, self.position) + 1) + 1

    def __str__(self) -> str:
        return f"{self.message} (line {self.line}, column {self.column})"

    def to_exception(self) -> SableSyntaxError:
        return SableSyntaxError(str(self), self.position)


@dataclass(frozen=True)
class EvalFailure:
    """Why evaluation stopped. ``kind`` is one of the ``SableError.kind`` tags."""

    kind: str
    message: str

    ok: ClassVar[bool] = False

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"

    def to_exception(self) -> SableError:
        return _ERRORS_BY_KIND.get(self.kind, SableError)(self.message)


ReadResult = Union[Value, ParseFailure]
EvalResult = Union[Value, EvalFailure]


def is_failure(result: object) -> bool:
    return isinstance(result, (ParseFailure, EvalFailure))
