# lento

This package holds the core data model of the Lento language. You can use it as a plain library.

## Modules

- `lento.types` is a structural type system with subtyping. Its type classes are:
  - `AnyType` and `UnitType`
  - `TopType`, the type of types
  - `LiteralType`, `FunctionType`, `TupleType`, `ListType` and `RecordType`
  - `GenericType`, `SumType` and `VariantType`

  `FunctionParameters` describes a parameter list. It has fixed parameters and an optional variadic tail, and `match_args` checks arguments against it. `CheckedType` wraps a type that may still be unknown. Use `CheckedType.unchecked()` to make one and `unwrap()` to get the type. `unwrap()` raises `ValueError` when the type is unknown.
- `lento.stdtypes` holds the standard types.
  - Primitive types: `STRING`, `CHAR`, `BOOL`, `UINT8`, `INT32`, `FLOAT64` and the others.
  - Compound types: `any_signed_integer()`, `any_unsigned_integer()`, `any_integer()`, `any_float()` and `any_number()`.
  - Constructors: `list_of`, `tuple_of` and `record_of`.
- `lento.errors` defines the errors.
  - `ParseError` carries a message and a source span.
  - `OperatorError` is raised when an operator cannot be defined. Its subclasses are `SignatureForSymbolExists`, `SymbolNotOverloadable` and `PositionForSymbolExists`.
  - `TypeDefinitionError` is raised when a type cannot be defined. Its subclasses are `TypeExists` and `NonLiteralType`.
- `lento.operators` describes operators.
  - `OperatorPosition` is prefix, infix, postfix or accumulating infix.
  - `OperatorAssociativity` gives the associativity.
  - `Precedence` lists the default precedence levels.
  - `OperatorSignature` describes what an operator takes and returns.
  - Handlers are either `RuntimeHandler` or `StaticHandler`. A `StaticHandler` rewrites a `StaticOperatorAst` into a node.
  - `Operator` is the full operator. `Operator.to_runtime()` gives a `RuntimeOperator`. It raises `TypeError` for a static operator.
- `lento.ast` holds the expression tree.
  - Node classes: `Literal`, `TupleNode`, `ListNode`, `RecordNode`, `Identifier`, `TypeNode`, `FunctionCall`, `VariationCall`, `FunctionDef`, `Binary`, `Unary`, `Assignment`, `Block` and `ErrorNode`.
  - `Module` is the root of a program.
  - Helpers: `make_tuple` and `unit`.
  - Every node has `print_sexpr()` and `checked_type()`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Example

```python
from lento.types import LiteralType
from lento.stdtypes import any_number

u8 = LiteralType("u8")
assert u8.subtype(any_number())
print(any_number())  # (i8 | i16 | ... | fbig)
```

Types are simplified before they are printed. Nested sums are flattened into a single list of alternatives.

Every type answers `subtype(other)`. `AnyType` is a subtype and a supertype of every type. A non-sum type is a subtype of a sum when it is a subtype of one of the alternatives. Function types compare their parameters and their return type in the same direction. `equals(other)` holds when the subtyping relation holds both ways.

## What it does not do

This package only provides the data structures:
- There is no lexer, parser or type checker that produces trees from source text.
- There is no evaluator.
- There is no standard library of runtime functions.
- There is no command-line program.

You build the nodes, types and operators yourself.