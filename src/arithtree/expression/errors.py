"""Exceptions raised by expression trees and their serialized form."""


class ExpressionError(Exception):
    """Base class for expression tree errors."""


class UnknownOperatorError(ExpressionError, ValueError):
    """Operator symbol outside the supported set."""

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"Unknown operator: {operator!r}")


class UnknownTagError(ExpressionError, KeyError):
    """Serialized stream contains a tag with no registered loader."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(tag)

    def __str__(self) -> str:
        return f"found unexpected token {self.tag!r}"


class MalformedStreamError(ExpressionError, ValueError):
    """Serialized stream is truncated or carries an invalid payload."""

    def __init__(self, message: str, position: int) -> None:
        self.position = position
        super().__init__(f"{message} (token {position})")
