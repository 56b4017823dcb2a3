import pytest
from llvmlite import ir


@pytest.fixture
def module() -> ir.Module:
    return ir.Module(name="shader")


@pytest.fixture
def func(module: ir.Module) -> ir.Function:
    fn_ty = ir.FunctionType(ir.VoidType(), [ir.IntType(32), ir.FloatType(), ir.IntType(32).as_pointer(1)])
    return ir.Function(module, fn_ty, name="main")


@pytest.fixture
def entry(func: ir.Function) -> ir.Block:
    return func.append_basic_block(name="entry")
