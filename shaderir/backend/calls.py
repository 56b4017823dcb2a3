"""
Call emission at an explicit insertion point.

Two insertion modes are supported:
- before a given instruction (`emit_call_before`)
- at the end of a given basic block (`emit_call_at_end`)

`emit_call` picks the mode from the kind of insertion point. Prefer
`NamedCallBuilder.create_named_call` when a builder is already positioned.
"""
from __future__ import annotations

from typing import Iterable, Sequence, Union

from llvmlite import ir

from shaderir.backend.builder import NamedCallBuilder
from shaderir.internals.errors import raise_internal_error


def emit_call_before(
    func_name: str,
    return_type: ir.Type,
    args: Sequence[ir.Value],
    attrs: Iterable[str],
    insert_before: ir.Instruction
) -> ir.CallInstr:
    """Emit a call to a named function immediately before an instruction.

    Args:
        func_name: Name of the function.
        return_type: Return type.
        args: Argument values.
        attrs: Call attributes.
        insert_before: Instruction the call is inserted before.

    Returns:
        The inserted call.
    """
    builder = NamedCallBuilder()
    builder.position_before(insert_before)
    return builder.create_named_call(func_name, return_type, args, attrs)


def emit_call_at_end(
    func_name: str,
    return_type: ir.Type,
    args: Sequence[ir.Value],
    attrs: Iterable[str],
    insert_at_end: ir.Block
) -> ir.CallInstr:
    """Emit a call to a named function at the end of a basic block.

    Args:
        func_name: Name of the function.
        return_type: Return type.
        args: Argument values.
        attrs: Call attributes.
        insert_at_end: Block the call is appended to.

    Returns:
        The inserted call.
    """
    builder = NamedCallBuilder(insert_at_end)
    return builder.create_named_call(func_name, return_type, args, attrs)


def emit_call(
    func_name: str,
    return_type: ir.Type,
    args: Sequence[ir.Value],
    attrs: Iterable[str],
    insert_pos: Union[ir.Instruction, ir.Block]
) -> ir.CallInstr:
    """Emit a call to a named function before an instruction or at a block end.

    Raises:
        InternalError CE0105: If insert_pos is neither an instruction nor a block.
    """
    if isinstance(insert_pos, ir.Block):
        return emit_call_at_end(func_name, return_type, args, attrs, insert_pos)
    if isinstance(insert_pos, ir.Instruction):
        return emit_call_before(func_name, return_type, args, attrs, insert_pos)
    raise_internal_error("CE0105", pos=repr(insert_pos))
