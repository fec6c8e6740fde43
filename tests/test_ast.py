import pytest

from lento import stdtypes
from lento.ast import (
    Assignment,
    Binary,
    Block,
    ErrorNode,
    FunctionCall,
    FunctionDef,
    Identifier,
    ListNode,
    Literal,
    Module,
    RecordNode,
    TupleNode,
    TypeNode,
    Unary,
    VariationCall,
    make_tuple,
    unit,
)
from lento.errors import ParseError
from lento.operators import RuntimeHandler, RuntimeOperator
from lento.types import CheckedType, FunctionParameters, LiteralType


def _u8(n):
    return Literal(n, stdtypes.UINT8)


def _add_op():
    params = FunctionParameters(
        (("lhs", stdtypes.any_number()), ("rhs", stdtypes.any_number()))
    )
    handler = RuntimeHandler(params, stdtypes.any_number(), lambda a, b: a + b)
    return RuntimeOperator("add", "+", handler)


def test_error_node_sexpr_and_unchecked():
    node = ErrorNode(ParseError("bad", (0, 1)))
    assert node.print_sexpr() == "<error!>"
    assert not node.checked_type().is_checked()


def test_literal_sexpr_and_type():
    node = _u8(1)
    assert node.print_sexpr() == "1"
    assert node.checked_type().unwrap() == stdtypes.UINT8


def test_literal_string_infers_str():
    node = Literal("Hello, World!")
    assert node.checked_type().unwrap() == stdtypes.STRING
    assert node.print_sexpr() == "Hello, World!"


def test_literal_equality():
    assert _u8(1) == _u8(1)
    assert _u8(1) != _u8(2)


def test_tuple_and_list_sexpr():
    elems = [_u8(1), _u8(2), _u8(3)]
    assert make_tuple(elems).print_sexpr() == "(1 2 3)"
    assert ListNode(elems).print_sexpr() == "[1 2 3]"


def test_make_tuple_is_unchecked():
    node = make_tuple([_u8(1)])
    assert node.elements == (_u8(1),)
    assert not node.checked_type().is_checked()


def test_unit_is_empty_unit_tuple():
    node = unit()
    assert node.elements == ()
    assert node.checked_type().unwrap() == stdtypes.UNIT
    assert node.print_sexpr() == "()"


def test_binary_sexpr_uses_symbol():
    node = Binary(_u8(1), _add_op(), _u8(2))
    assert node.print_sexpr() == "(+ 1 2)"
    assert node.op.name == "add"


def test_nested_binary_left_tree():
    op = _add_op()
    node = Binary(Binary(_u8(1), op, _u8(2)), op, _u8(3))
    assert node.print_sexpr() == "(+ (+ 1 2) 3)"


def test_unary_sexpr():
    node = Unary(_add_op(), _u8(5))
    assert node.print_sexpr().startswith("(+ ")
    assert node.print_sexpr().endswith("5)")


def test_assignment_sexpr():
    node = Assignment(Identifier("x"), _u8(1))
    assert node.print_sexpr() == "(= x 1)"
    assert not node.checked_type().is_checked()


def test_function_call_sexpr_and_equality():
    call = FunctionCall("println", [Literal("Hello, World!")])
    expected = FunctionCall("println", (Literal("Hello, World!"),), CheckedType())
    assert call == expected
    assert call.print_sexpr() == "(println Hello, World!)"


def test_checked_types_propagate():
    ty = CheckedType(stdtypes.UINT8)
    assert Identifier("x", ty).checked_type() == ty
    assert Block([_u8(1)], ty).checked_type() == ty
    assert FunctionCall("f", [], ty).checked_type() == ty
    assert Binary(_u8(1), _add_op(), _u8(2), ty).checked_type() == ty


def test_variation_call_always_unchecked():
    node = VariationCall("f", [_u8(1)], CheckedType(stdtypes.UINT8))
    assert not node.checked_type().is_checked()
    assert node.print_sexpr() == "(f 1)"


def test_type_node():
    node = TypeNode(stdtypes.INT32)
    assert node.print_sexpr() == "i32"
    assert node.checked_type().unwrap() == LiteralType("Type")


def test_function_def_sexpr_contains_parts():
    params = FunctionParameters((("x", stdtypes.INT32),))
    node = FunctionDef("id", params, Identifier("x"))
    assert node.print_sexpr() == f"(fn id {params} x)"


def test_block_sexpr():
    node = Block([_u8(1), _u8(2)])
    assert node.print_sexpr() == "(1 2)"


def test_record_fields_and_keys():
    node = RecordNode([("x", _u8(1)), ("y", _u8(2))])
    assert node.keys() == ["x", "y"]
    assert node.fields[1][1] == _u8(2)
    assert "x" in node.print_sexpr()


def test_nested_record():
    inner = RecordNode([("y", _u8(1))])
    outer = RecordNode([("x", inner)])
    assert isinstance(outer.fields[0][1], RecordNode)
    assert outer.fields[0][1].fields[0] == ("y", _u8(1))


def test_module_holds_expressions():
    mod = Module("main", [_u8(1), _u8(2)], "source")
    assert mod.name == "main"
    assert len(mod.expressions) == 2
    assert mod.expressions[0] == _u8(1)


def test_nodes_are_immutable():
    node = Identifier("x")
    with pytest.raises(AttributeError):
        node.name = "y"
    assert node.name == "x"
    assert node.print_sexpr() == "x"