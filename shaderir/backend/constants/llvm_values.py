"""LLVM IR constant value creation utilities.

This module provides the reserved don't-care sentinel and factory functions
for building it, so producers and `is_dont_care_value` agree on one value.
"""

from llvmlite import ir
from shaderir.backend.constants.bit_widths import INT32_BIT_WIDTH, UINT32_MASK


# Reserved "intentionally unspecified" operand value (all ones in 32 bits)
DONT_CARE_VALUE = UINT32_MASK

# Separator between a base symbol and each mangled type suffix
MANGLE_SEPARATOR = "."


# === Factory Functions ===

def make_dont_care(bit_width: int = INT32_BIT_WIDTH) -> ir.Constant:
    """Create the don't-care sentinel as an integer constant.

    Widths of 32 bits or more carry all ones; the low 32 bits are what
    `is_dont_care_value` inspects.
    """
    if bit_width < INT32_BIT_WIDTH:
        raise ValueError(f"don't-care sentinel needs at least 32 bits, got i{bit_width}")
    return ir.Constant(ir.IntType(bit_width), (1 << bit_width) - 1)


DONT_CARE_I32 = make_dont_care()
