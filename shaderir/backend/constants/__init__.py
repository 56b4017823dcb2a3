"""Backend constants facade.

Organized by category:
- bit_widths: LLVM scalar type bit widths
- llvm_values: the don't-care sentinel, mangling separator, constant factories
"""

# Bit widths
from shaderir.backend.constants.bit_widths import (
    INT32_BIT_WIDTH,
    HALF_BIT_WIDTH,
    FLOAT_BIT_WIDTH,
    DOUBLE_BIT_WIDTH,
    FLOAT_BIT_WIDTHS,
    UINT32_MASK,
)

# LLVM constant values and factory functions
from shaderir.backend.constants.llvm_values import (
    DONT_CARE_VALUE,
    DONT_CARE_I32,
    MANGLE_SEPARATOR,
    make_dont_care,
)

__all__ = [
    'INT32_BIT_WIDTH',
    'HALF_BIT_WIDTH',
    'FLOAT_BIT_WIDTH',
    'DOUBLE_BIT_WIDTH',
    'FLOAT_BIT_WIDTHS',
    'UINT32_MASK',
    'DONT_CARE_VALUE',
    'DONT_CARE_I32',
    'MANGLE_SEPARATOR',
    'make_dont_care',
]
