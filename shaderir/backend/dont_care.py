"""Detection of the reserved don't-care operand value."""
from __future__ import annotations

from llvmlite import ir

from shaderir.backend.constants import DONT_CARE_VALUE, UINT32_MASK


def is_dont_care_value(value: ir.Value) -> bool:
    """Check if a value is the don't-care sentinel (0xFFFFFFFF).

    The constant is zero-extended from its own width and the low 32 bits
    compared, so i32 -1 and i64 -1 match while i8 -1 (255) does not.

    Args:
        value: Value to check.

    Returns:
        True for an integer constant equal to the sentinel, False for
        anything else (non-constants, non-integer and undef constants).
    """
    if not isinstance(value, ir.Constant) or not isinstance(value.type, ir.IntType):
        return False
    if not isinstance(value.constant, int):
        return False
    zext_value = value.constant & ((1 << value.type.width) - 1)
    return (zext_value & UINT32_MASK) == DONT_CARE_VALUE
