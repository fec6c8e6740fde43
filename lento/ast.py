"""Syntax tree nodes produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from lento import stdtypes
from lento.errors import ParseError
from lento.operators import RuntimeOperator
from lento.types import CheckedType, FunctionParameters, LiteralType, Type

RecordKey = Union[str, int, float]

_UNCHECKED = CheckedType()


def _join(nodes) -> str:
    return " ".join(node.print_sexpr() for node in nodes)


def _infer_literal_type(value: Any) -> Optional[Type]:
    if value is None:
        return stdtypes.UNIT
    if isinstance(value, bool):
        return stdtypes.BOOL
    if isinstance(value, str):
        return stdtypes.STRING
    if isinstance(value, float):
        return stdtypes.FLOAT64
    return None


class Node:
    """Base class of every expression in the tree."""

    def print_sexpr(self) -> str:
        raise NotImplementedError

    def checked_type(self) -> CheckedType:
        """The type assigned by type checking, or an unchecked marker."""
        ty = getattr(self, "ty", None)
        if isinstance(ty, CheckedType):
            return ty
        return _UNCHECKED


@dataclass(frozen=True)
class ErrorNode(Node):
    """A placeholder left where parsing failed."""

    error: ParseError

    def print_sexpr(self) -> str:
        return "<error!>"

    def checked_type(self) -> CheckedType:
        return _UNCHECKED


@dataclass(frozen=True)
class Literal(Node):
    """A constant value written directly in the source."""

    value: Any
    value_type: Optional[Type] = None

    def __post_init__(self) -> None:
        if self.value_type is None:
            object.__setattr__(self, "value_type", _infer_literal_type(self.value))

    def print_sexpr(self) -> str:
        return str(self.value)

    def checked_type(self) -> CheckedType:
        return CheckedType(self.value_type)


@dataclass(frozen=True)
class TupleNode(Node):
    """A fixed-size collection of elements."""

    elements: tuple = ()
    ty: CheckedType = field(default=_UNCHECKED)

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def print_sexpr(self) -> str:
        return f"({_join(self.elements)})"


@dataclass(frozen=True)
class ListNode(Node):
    """A dynamic list of elements sharing one type."""

    elements: tuple = ()
    ty: CheckedType = field(default=_UNCHECKED)

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def print_sexpr(self) -> str:
        return f"[{_join(self.elements)}]"


@dataclass(frozen=True)
class RecordNode(Node):
    """Key-value pairs; keys are strings, numbers or characters."""

    fields: tuple = ()
    ty: CheckedType = field(default=_UNCHECKED)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "fields", tuple((key, value) for key, value in self.fields)
        )

    def keys(self) -> list:
        return [key for key, _ in self.fields]

    def print_sexpr(self) -> str:
        inner = " ".join(f"({key} {value.print_sexpr()})" for key, value in self.fields)
        return "{" + inner + "}"


@dataclass(frozen=True)
class Identifier(Node):
    """A named reference to a value in the environment."""

    name: str
    ty: CheckedType = field(default=_UNCHECKED)

    def print_sexpr(self) -> str:
        return self.name


@dataclass(frozen=True)
class TypeNode(Node):
    """A reference to a type."""

    type: Type

    def print_sexpr(self) -> str:
        return str(self.type)

    def checked_type(self) -> CheckedType:
        return CheckedType(LiteralType("Type"))


@dataclass(frozen=True)
class FunctionCall(Node):
    """A call of a named function."""

    name: str
    args: tuple = ()
    ty: CheckedType = field(default=_UNCHECKED)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def print_sexpr(self) -> str:
        return f"({self.name} {_join(self.args)})"


@dataclass(frozen=True)
class VariationCall(Node):
    """A call of one resolved function variation."""

    variation: Any
    args: tuple = ()
    ty: CheckedType = field(default=_UNCHECKED)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def print_sexpr(self) -> str:
        return f"({self.variation} {_join(self.args)})"

    def checked_type(self) -> CheckedType:
        return _UNCHECKED


@dataclass(frozen=True)
class FunctionDef(Node):
    """A named function definition with parameters and a body."""

    name: str
    params: FunctionParameters
    body: Node
    ty: CheckedType = field(default=_UNCHECKED)

    def print_sexpr(self) -> str:
        return f"(fn {self.name} {self.params} {self.body.print_sexpr()})"


@dataclass(frozen=True)
class Binary(Node):
    """An operation with two operands."""

    lhs: Node
    op: RuntimeOperator
    rhs: Node
    ty: CheckedType = field(default=_UNCHECKED)

    def print_sexpr(self) -> str:
        return f"({self.op.symbol} {self.lhs.print_sexpr()} {self.rhs.print_sexpr()})"


@dataclass(frozen=True)
class Unary(Node):
    """An operation with one operand."""

    op: RuntimeOperator
    operand: Node
    ty: CheckedType = field(default=_UNCHECKED)

    def print_sexpr(self) -> str:
        return f"({self.op.symbol} {self.operand.print_sexpr()})"


@dataclass(frozen=True)
class Assignment(Node):
    """Binds a value to a target pattern."""

    target: Node
    value: Node
    ty: CheckedType = field(default=_UNCHECKED)

    def print_sexpr(self) -> str:
        return f"(= {self.target.print_sexpr()} {self.value.print_sexpr()})"


@dataclass(frozen=True)
class Block(Node):
    """Evaluates expressions in order; its value is the last one's."""

    expressions: tuple = ()
    ty: CheckedType = field(default=_UNCHECKED)

    def __post_init__(self) -> None:
        object.__setattr__(self, "expressions", tuple(self.expressions))

    def print_sexpr(self) -> str:
        return f"({_join(self.expressions)})"


@dataclass
class Module:
    """The root of a parsed program."""

    name: str
    expressions: list = field(default_factory=list)
    source: Any = None


def make_tuple(elements) -> TupleNode:
    """A tuple node whose type is not yet checked."""
    return TupleNode(tuple(elements), _UNCHECKED)


def unit() -> TupleNode:
    """The unit value: an empty tuple of unit type."""
    return TupleNode((), CheckedType(stdtypes.UNIT))