"""Operator definitions used by the parser: positions, precedence and handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Callable, Union

from lento.types import FunctionParameters, Type


class OperatorPosition(Enum):
    PREFIX = "prefix"
    INFIX = "infix"
    POSTFIX = "postfix"
    # Binary operator collecting a chain of operands, as `a, b, c` -> (a, b, c).
    INFIX_ACCUMULATE = "infix_accumulate"

    def is_prefix(self) -> bool:
        return self is OperatorPosition.PREFIX

    def is_infix(self) -> bool:
        return self in (OperatorPosition.INFIX, OperatorPosition.INFIX_ACCUMULATE)

    def is_postfix(self) -> bool:
        return self is OperatorPosition.POSTFIX

    def is_accumulate(self) -> bool:
        return self is OperatorPosition.INFIX_ACCUMULATE


class OperatorAssociativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class Precedence(IntEnum):
    """Default operator precedences; higher binds tighter."""

    ASSIGNMENT = 100
    CONDITIONAL = 200
    LOGICAL_OR = 300
    LOGICAL_AND = 400
    EQUALITY = 500
    TUPLE = 600
    ADDITIVE = 700
    MULTIPLICATIVE = 800
    EXPONENTIAL = 900
    PREFIX = 1000
    POSTFIX = 1100


_ARITY = {
    OperatorPosition.PREFIX: 1,
    OperatorPosition.INFIX: 2,
    OperatorPosition.POSTFIX: 1,
}


@dataclass(frozen=True)
class StaticOperatorAst:
    """Operands handed to a compile-time operator handler."""

    position: OperatorPosition
    operands: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "operands", tuple(self.operands))
        expected = _ARITY.get(self.position)
        if expected is not None and len(self.operands) != expected:
            raise ValueError(
                f"{self.position.value} operator expects {expected} operand(s), "
                f"got {len(self.operands)}"
            )


@dataclass(frozen=True)
class OperatorSignature:
    params: FunctionParameters
    returns: Type


@dataclass(frozen=True)
class RuntimeHandler:
    """A function evaluated at runtime when the operator is applied."""

    params: FunctionParameters
    returns: Type
    function: Callable[..., Any] = field(compare=False)

    def __call__(self, *args: Any) -> Any:
        return self.function(*args)


@dataclass(frozen=True)
class StaticHandler:
    """A compile-time handler that rewrites the operator's operands into a node."""

    signature: OperatorSignature
    function: Callable[[StaticOperatorAst], Any] = field(compare=False)

    def __call__(self, operands: StaticOperatorAst) -> Any:
        return self.function(operands)


OperatorHandler = Union[RuntimeHandler, StaticHandler]


@dataclass(frozen=True)
class RuntimeOperator:
    name: str
    symbol: str
    handler: RuntimeHandler

    def signature(self) -> OperatorSignature:
        return OperatorSignature(self.handler.params, self.handler.returns)


@dataclass(frozen=True)
class Operator:
    """An operator known to the parser."""

    name: str
    symbol: str
    position: OperatorPosition
    precedence: int
    associativity: OperatorAssociativity
    overloadable: bool
    # Only meaningful for accumulating infix operators.
    allow_trailing: bool
    handler: OperatorHandler

    def signature(self) -> OperatorSignature:
        if isinstance(self.handler, StaticHandler):
            return self.handler.signature
        return OperatorSignature(self.handler.params, self.handler.returns)

    def to_runtime(self) -> RuntimeOperator:
        """Return the runtime form; raise TypeError for a static operator."""
        if isinstance(self.handler, StaticHandler):
            raise TypeError("Cannot convert a static operator to a runtime operator")
        return RuntimeOperator(self.name, self.symbol, self.handler)