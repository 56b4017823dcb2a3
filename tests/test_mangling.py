import pytest
from llvmlite import ir

from shaderir.backend.mangling import add_type_mangling, mangle
from shaderir.internals.errors import InternalError

i32 = ir.IntType(32)
f32 = ir.FloatType()


def test_trailing_dot_is_normalized() -> None:
    assert mangle("foo.", i32, [f32]) == "foo.i32.f32"
    assert mangle("foo", i32, [f32]) == "foo.i32.f32"


def test_only_one_trailing_dot_is_stripped() -> None:
    assert mangle("foo..", i32, []) == "foo..i32"


def test_void_or_missing_return_type_adds_no_suffix() -> None:
    assert mangle("bar", ir.VoidType(), []) == "bar"
    assert mangle("bar", None, []) == "bar"
    assert mangle("bar.", None, [i32]) == "bar.i32"


def test_argument_suffixes_follow_argument_order() -> None:
    args = [ir.VectorType(f32, 4), i32.as_pointer(1), ir.LiteralStructType([i32, f32])]
    assert mangle("lgc.helper", ir.VectorType(i32, 2), args) == "lgc.helper.v2i32.v4f32.p1i32.s[i32,f32]"


def test_mangling_is_deterministic() -> None:
    args = [ir.ArrayType(f32, 4), i32]
    assert mangle("h.", f32, args) == mangle("h.", f32, args)


def test_empty_base_name_is_rejected() -> None:
    with pytest.raises(InternalError) as excinfo:
        mangle("", i32, [])
    assert excinfo.value.code == "CE0102"


def test_unsupported_argument_type_is_rejected() -> None:
    with pytest.raises(InternalError) as excinfo:
        mangle("foo", None, [ir.LabelType()])
    assert excinfo.value.code == "CE0101"


def test_add_type_mangling_uses_argument_value_types() -> None:
    args = [ir.Constant(i32, 7), ir.Constant(f32, 1.5)]
    assert add_type_mangling(ir.VoidType(), args, "store.") == "store.i32.f32"
    assert add_type_mangling(f32, [], "load") == "load.f32"
