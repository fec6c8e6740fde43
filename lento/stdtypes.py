"""Standard primitive, compound and collection types."""

from __future__ import annotations

from typing import Iterable

from lento.types import (
    AnyType,
    ListType,
    LiteralType,
    RecordType,
    SumType,
    TopType,
    TupleType,
    Type,
    UnitType,
)

ANY = AnyType()
UNIT = UnitType()
TOP = TopType()

STRING = LiteralType("str")
CHAR = LiteralType("char")
BOOL = LiteralType("bool")

UINT1 = LiteralType("u1")
UINT8 = LiteralType("u8")
UINT16 = LiteralType("u16")
UINT32 = LiteralType("u32")
UINT64 = LiteralType("u64")
UINT128 = LiteralType("u128")
UINTBIG = LiteralType("ubig")

INT8 = LiteralType("i8")
INT16 = LiteralType("i16")
INT32 = LiteralType("i32")
INT64 = LiteralType("i64")
INT128 = LiteralType("i128")
INTBIG = LiteralType("ibig")

FLOAT32 = LiteralType("f32")
FLOAT64 = LiteralType("f64")
FLOATBIG = LiteralType("fbig")


def any_signed_integer() -> SumType:
    """Sum of all signed integer types."""
    return SumType((INT8, INT16, INT32, INT64, INT128, INTBIG))


def any_unsigned_integer() -> SumType:
    """Sum of all unsigned integer types."""
    return SumType((UINT1, UINT8, UINT16, UINT32, UINT64, UINT128, UINTBIG))


def any_float() -> SumType:
    """Sum of all floating-point types."""
    return SumType((FLOAT32, FLOAT64, FLOATBIG))


def any_integer() -> SumType:
    """Sum of the signed and unsigned integer sums."""
    return SumType((any_signed_integer(), any_unsigned_integer()))


def any_number() -> SumType:
    """Sum of every integer and floating-point type."""
    return SumType((any_integer(), any_float()))


def list_of(t: Type) -> ListType:
    return ListType(t)


def tuple_of(types: Iterable[Type]) -> TupleType:
    return TupleType(tuple(types))


def record_of(fields: Iterable[tuple[str, Type]]) -> RecordType:
    return RecordType(tuple(fields))