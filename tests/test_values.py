import pytest

from linhvm.values import (
    FunctionObject,
    FunctionParameter,
    UInt,
    create_function,
    intern_string,
)


def test_uint_keeps_small_values():
    assert UInt(5) == 5
    assert isinstance(UInt(5), int)


def test_uint_wraps_negative_values_modulo_2_64():
    top = UInt(-1)
    assert UInt(top + 1) == 0
    assert top > 0


def test_uint_repr_mentions_value():
    assert repr(UInt(7)) == "UInt(7)"


def test_function_parameter_defaults():
    param = FunctionParameter("x")
    assert param.name == "x"
    assert param.type is None
    assert param.is_static is False


def test_create_function_keeps_fields():
    params = [FunctionParameter("a", "int", True), FunctionParameter("b")]
    body = ["instr1", "instr2"]
    fn = create_function("add", params, body)
    assert fn.name == "add"
    assert fn.params == params
    assert fn.body == body


def test_create_function_copies_lists():
    params = [FunctionParameter("a")]
    fn = create_function("f", params, [])
    params.append(FunctionParameter("b"))
    assert len(fn.params) == 1


def test_function_objects_compare_by_identity():
    first = FunctionObject("f")
    second = FunctionObject("f")
    assert first == first
    assert (first == second) is False


@pytest.mark.parametrize("text", ["hello", "", "xin chào"])
def test_intern_string_returns_shared_copy(text):
    rebuilt = "".join(list(text))
    assert intern_string(rebuilt) == text
    assert intern_string(rebuilt) is intern_string(text)