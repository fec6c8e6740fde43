"""The type system: type values, subtyping, simplification and display."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol


class _HasCheckedType(Protocol):
    def checked_type(self) -> "CheckedType": ...


NamedType = tuple[str, "Type"]


def _named(items: Iterable) -> tuple:
    return tuple((str(name), ty) for name, ty in items)


class Type:
    """Base class of every type value."""

    def _subtype_same(self, other: "Type") -> Optional[bool]:
        """Subtype check against a type of the same kind, or None if undecided."""
        return None

    def subtype(self, other: "Type") -> bool:
        """Return True if this type can be used where `other` is expected."""
        if isinstance(other, SumType) and not isinstance(self, SumType):
            return any(self.subtype(t) for t in other.variants)
        if type(self) is type(other):
            decided = self._subtype_same(other)
            if decided is not None:
                return decided
        return isinstance(self, AnyType) or isinstance(other, AnyType)

    def equals(self, other: "Type") -> bool:
        """Two types are equal when each is a subtype of the other."""
        return self.subtype(other) and other.subtype(self)

    def simplify(self) -> "Type":
        return self

    def _render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.simplify()._render()


@dataclass(frozen=True)
class AnyType(Type):
    """The `any` type, accepted anywhere."""

    def _render(self) -> str:
        return "any"

    def __str__(self) -> str:
        return "any"


@dataclass(frozen=True)
class UnitType(Type):
    """The unit type."""

    def _render(self) -> str:
        return "()"

    def __str__(self) -> str:
        return "()"


@dataclass(frozen=True)
class TopType(Type):
    """The type of types."""

    def _render(self) -> str:
        return "type"

    def __str__(self) -> str:
        return "type"


@dataclass(frozen=True)
class LiteralType(Type):
    """A named type such as `u8` or `str`."""

    name: str

    def _subtype_same(self, other: "LiteralType") -> Optional[bool]:
        return self.name == other.name

    def _render(self) -> str:
        return self.name


@dataclass(frozen=True)
class FunctionParameters:
    """Parameter list of a function: fixed named parameters and an optional variadic tail."""

    params: tuple = ()
    variadic: Optional[tuple] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", _named(self.params))
        if self.variadic is not None:
            name, ty = self.variadic
            object.__setattr__(self, "variadic", (str(name), ty))

    def is_variadic(self) -> bool:
        return self.variadic is not None

    def match_args(self, args) -> bool:
        """Return True if the (type-checked) arguments satisfy the parameter types."""
        arg_types = [arg.checked_type().unwrap() for arg in args]
        if self.variadic is None:
            if len(self.params) != len(arg_types):
                return False
            return all(
                arg_ty.subtype(ty)
                for (_, ty), arg_ty in zip(self.params, arg_types)
            )
        if len(self.params) > len(arg_types):
            return False
        fixed_ok = all(
            ty.subtype(arg_ty) for (_, ty), arg_ty in zip(self.params, arg_types)
        )
        if not fixed_ok:
            return False
        var_type = self.variadic[1]
        return all(var_type.subtype(arg_ty) for arg_ty in arg_types[len(self.params):])

    def type_list(self) -> str:
        """Render the parameter types only, as used inside a function type."""
        parts = [str(ty) for _, ty in self.params]
        if self.variadic is not None:
            parts.append(f"...{self.variadic[1]}")
        return ", ".join(parts)

    def __str__(self) -> str:
        parts = [f"{ty} {name}" for name, ty in self.params]
        if self.variadic is not None:
            name, ty = self.variadic
            parts.append(f"{ty} ...{name}")
        return ", ".join(parts)


@dataclass(frozen=True)
class FunctionType(Type):
    """A function type with parameters and a return type."""

    params: FunctionParameters
    returns: Type

    def _subtype_same(self, other: "FunctionType") -> Optional[bool]:
        if self.params.is_variadic() != other.params.is_variadic():
            return False
        if len(self.params.params) != len(other.params.params):
            return False
        if not all(
            p1.subtype(p2)
            for (_, p1), (_, p2) in zip(self.params.params, other.params.params)
        ):
            return False
        if self.params.is_variadic() and not self.params.variadic[1].subtype(
            other.params.variadic[1]
        ):
            return False
        return self.returns.subtype(other.returns)

    def simplify(self) -> "FunctionType":
        return FunctionType(self.params, self.returns.simplify())

    def _render(self) -> str:
        return f"({self.params.type_list()}) -> {self.returns}"


@dataclass(frozen=True)
class TupleType(Type):
    """A fixed-size product of element types."""

    elements: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def _subtype_same(self, other: "TupleType") -> Optional[bool]:
        return len(self.elements) == len(other.elements) and all(
            a.subtype(b) for a, b in zip(self.elements, other.elements)
        )

    def simplify(self) -> "TupleType":
        return TupleType(tuple(t.simplify() for t in self.elements))

    def _render(self) -> str:
        return "(" + ", ".join(str(t) for t in self.elements) + ")"


@dataclass(frozen=True)
class ListType(Type):
    """A list whose elements share one type."""

    element: Type

    def _subtype_same(self, other: "ListType") -> Optional[bool]:
        return self.element.subtype(other.element)

    def simplify(self) -> "ListType":
        return ListType(self.element.simplify())

    def _render(self) -> str:
        return f"[{self.element}]"


@dataclass(frozen=True)
class RecordType(Type):
    """A record of named fields in order."""

    fields: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", _named(self.fields))

    def _subtype_same(self, other: "RecordType") -> Optional[bool]:
        return len(self.fields) == len(other.fields) and all(
            n1 == n2 and t1.subtype(t2)
            for (n1, t1), (n2, t2) in zip(self.fields, other.fields)
        )

    def simplify(self) -> "RecordType":
        return RecordType(tuple((n, t.simplify()) for n, t in self.fields))

    def _render(self) -> str:
        return "{" + ", ".join(f"{n}: {t}" for n, t in self.fields) + "}"


@dataclass(frozen=True)
class GenericType(Type):
    """A named generic type with type parameters and a body."""

    name: str
    params: tuple
    body: Type

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))

    def _subtype_same(self, other: "GenericType") -> Optional[bool]:
        return (
            self.name == other.name
            and len(self.params) == len(other.params)
            and all(a.subtype(b) for a, b in zip(self.params, other.params))
        )

    def simplify(self) -> "GenericType":
        return GenericType(
            self.name, tuple(p.simplify() for p in self.params), self.body.simplify()
        )

    def _render(self) -> str:
        return f"{self.name}<" + ", ".join(str(p) for p in self.params) + ">"


@dataclass(frozen=True)
class SumType(Type):
    """A union of existing types."""

    variants: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "variants", tuple(self.variants))

    def _subtype_same(self, other: "SumType") -> Optional[bool]:
        return len(self.variants) == len(other.variants) and all(
            a.subtype(b) for a, b in zip(self.variants, other.variants)
        )

    def simplify(self) -> "SumType":
        flat: list[Type] = []
        for variant in self.variants:
            simple = variant.simplify()
            if isinstance(simple, SumType):
                flat.extend(simple.variants)
            else:
                flat.append(simple)
        return SumType(tuple(flat))

    def _render(self) -> str:
        return "(" + " | ".join(str(t) for t in self.variants) + ")"


@dataclass(frozen=True)
class VariantType(Type):
    """A named variant of a parent sum type, wrapping field types."""

    parent: Type
    name: str
    fields: tuple = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    def _subtype_same(self, other: "VariantType") -> Optional[bool]:
        return (
            self.parent == other.parent
            and self.name == other.name
            and len(self.fields) == len(other.fields)
            and all(a.subtype(b) for a, b in zip(self.fields, other.fields))
        )

    def simplify(self) -> "VariantType":
        return VariantType(self.parent, self.name, tuple(f.simplify() for f in self.fields))

    def _render(self) -> str:
        return f"{self.name}(" + ", ".join(str(f) for f in self.fields) + ")"


@dataclass(frozen=True)
class CheckedType:
    """A type that may not yet have been determined by type checking."""

    type: Optional[Type] = None

    @classmethod
    def unchecked(cls) -> "CheckedType":
        return cls()

    def is_checked(self) -> bool:
        return self.type is not None

    def unwrap(self) -> Type:
        """Return the checked type; raise ValueError if it is unchecked."""
        if self.type is None:
            raise ValueError("Unwrap of unchecked type")
        return self.type

    def is_exact_type(self, t: Type) -> bool:
        return self.type is not None and self.type == t

    def __str__(self) -> str:
        return "unchecked" if self.type is None else str(self.type)