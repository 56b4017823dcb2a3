import logging

import pytest
from llvmlite import ir

from shaderir.backend.builder import NamedCallBuilder
from shaderir.backend.calls import emit_call, emit_call_at_end, emit_call_before
from shaderir.backend.mangling import add_type_mangling
from shaderir.internals.errors import InternalError

i32 = ir.IntType(32)
f32 = ir.FloatType()


def test_call_at_end_declares_function(module: ir.Module, func: ir.Function, entry: ir.Block) -> None:
    call = emit_call_at_end("helper", f32, [func.args[0]], ["nounwind"], entry)
    assert entry.instructions[-1] is call
    helper = module.get_global("helper")
    assert isinstance(helper, ir.Function)
    assert helper.ftype == ir.FunctionType(f32, [i32])
    assert "nounwind" in helper.attributes
    assert "nounwind" in call.attributes
    assert call.callee is helper


def test_call_before_instruction(func: ir.Function, entry: ir.Block) -> None:
    builder = ir.IRBuilder(entry)
    ret = builder.ret_void()
    call = emit_call_before("side_effect", ir.VoidType(), [], [], ret)
    assert entry.instructions == [call, ret]


def test_emit_call_dispatches_on_insertion_point(func: ir.Function, entry: ir.Block) -> None:
    first = emit_call("h", i32, [func.args[0]], [], entry)
    second = emit_call("h", i32, [func.args[0]], [], first)
    assert entry.instructions == [second, first]


def test_same_signature_reuses_declaration(module: ir.Module, func: ir.Function, entry: ir.Block) -> None:
    args = [func.args[0], func.args[1]]
    name = add_type_mangling(f32, args, "lgc.mix.")
    first = emit_call(name, f32, args, ["readnone"], entry)
    second = emit_call(name, f32, args, ["readnone"], entry)
    assert first.callee is second.callee
    assert [fn.name for fn in module.functions].count(name) == 1
    assert name == "lgc.mix.f32.i32.f32"


def test_conflicting_signature_is_fatal(func: ir.Function, entry: ir.Block) -> None:
    emit_call("h", i32, [func.args[0]], [], entry)
    with pytest.raises(InternalError) as excinfo:
        emit_call("h", f32, [func.args[0]], [], entry)
    assert excinfo.value.code == "CE0104"


def test_name_taken_by_global_variable_is_fatal(module: ir.Module, entry: ir.Block) -> None:
    ir.GlobalVariable(module, i32, name="counter")
    with pytest.raises(InternalError) as excinfo:
        emit_call("counter", ir.VoidType(), [], [], entry)
    assert excinfo.value.code == "CE0104"


def test_unsupported_insertion_point(func: ir.Function) -> None:
    with pytest.raises(InternalError) as excinfo:
        emit_call("h", ir.VoidType(), [], [], func)
    assert excinfo.value.code == "CE0105"


def test_unpositioned_builder_is_fatal() -> None:
    with pytest.raises(InternalError) as excinfo:
        NamedCallBuilder().create_named_call("h", ir.VoidType(), [])
    assert excinfo.value.code == "CE0106"


def test_builder_logs_declarations(func: ir.Function, entry: ir.Block, caplog: pytest.LogCaptureFixture) -> None:
    builder = NamedCallBuilder(entry)
    with caplog.at_level(logging.DEBUG, logger="shaderir.backend.builder"):
        builder.create_named_call("h", ir.VoidType(), [])
        builder.create_named_call("h", ir.VoidType(), [])
    assert "declared h" in caplog.text
    assert "reusing declaration of h" in caplog.text
