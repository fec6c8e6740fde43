"""Errors raised while parsing and while defining operators or types."""

from __future__ import annotations


class ParseError(Exception):
    """A parse failure with a message and a source span."""

    def __init__(self, message: str, span: tuple[int, int]) -> None:
        super().__init__(message, span)
        self.message = message
        self.span = (span[0], span[1])

    def __str__(self) -> str:
        return f"{self.message} in {self.span}"

    def __repr__(self) -> str:
        return f"ParseError({self.message!r}, {self.span!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.message, self.span) == (other.message, other.span)

    def __hash__(self) -> int:
        return hash((self.message, self.span))


class OperatorError(Exception):
    """An operator could not be added to the operator table."""


class SignatureForSymbolExists(OperatorError):
    """An operator with the same symbol and signature is already defined."""


class SymbolNotOverloadable(OperatorError):
    """The existing operator for this symbol may not be overloaded."""


class PositionForSymbolExists(OperatorError):
    """An operator with the same symbol and position is already defined."""


class TypeDefinitionError(Exception):
    """A type could not be added to the type table."""


class TypeExists(TypeDefinitionError):
    """A type with this name is already defined."""


class NonLiteralType(TypeDefinitionError):
    """Only literal (named) types may be defined this way."""