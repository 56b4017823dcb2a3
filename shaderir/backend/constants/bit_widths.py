"""LLVM scalar type bit widths.

This module provides centralized constants for LLVM IR scalar bit widths.
Used with ir.IntType(width) and for sizing floating-point types, which
llvmlite does not expose a width for.
"""
from llvmlite import ir

# Integer type bit widths
INT32_BIT_WIDTH = 32    # i32 type (sentinels)

# Floating-point type bit widths
HALF_BIT_WIDTH = 16     # half
FLOAT_BIT_WIDTH = 32    # float
DOUBLE_BIT_WIDTH = 64   # double

FLOAT_BIT_WIDTHS = {
    ir.HalfType: HALF_BIT_WIDTH,
    ir.FloatType: FLOAT_BIT_WIDTH,
    ir.DoubleType: DOUBLE_BIT_WIDTH,
}

UINT32_MASK = (1 << INT32_BIT_WIDTH) - 1
