"""Type predicates for LLVM IR types.

Bitcast compatibility is decided purely on bit-pattern size: an integer and a
floating-point value of the same total width may be reinterpreted as each
other, which is what raw register reinterpretation needs.
"""

from typing import Optional

from llvmlite import ir

from shaderir.backend.constants import FLOAT_BIT_WIDTHS


def scalar_bit_width(ty: ir.Type) -> Optional[int]:
    """Get the bit width of an integer or floating-point type.

    Args:
        ty: The type to check.

    Returns:
        The width in bits, or None if the type is not an integer or float.

    Examples:
        >>> scalar_bit_width(ir.IntType(16))
        16
        >>> scalar_bit_width(ir.DoubleType())
        64
        >>> scalar_bit_width(ir.VoidType()) is None
        True
    """
    if isinstance(ty, ir.IntType):
        return ty.width
    return FLOAT_BIT_WIDTHS.get(type(ty))


def scalar_type(ty: ir.Type) -> ir.Type:
    """Element type of a vector, or the type itself otherwise."""
    if isinstance(ty, ir.VectorType):
        return ty.element
    return ty


def component_count(ty: ir.Type) -> int:
    """Number of components of a type: the vector length, or 1 otherwise."""
    if isinstance(ty, ir.VectorType):
        return ty.count
    return 1


def is_single_value_type(ty: ir.Type) -> bool:
    """Check if a type is a scalar or a vector of scalars.

    Pointers, arrays, structs and void are not single-value types here.

    Args:
        ty: The type to check.

    Returns:
        True for integer and floating-point types and vectors of them.
    """
    return scalar_bit_width(scalar_type(ty)) is not None


def can_bit_cast(ty1: ir.Type, ty2: ir.Type) -> bool:
    """Check if a value of one type can be bitcast to the other.

    Identical types are always compatible. Otherwise both must be
    single-value types with the same total width (component count times
    scalar width). Integer and float families may be mixed.

    Args:
        ty1: One type.
        ty2: The other type.

    Returns:
        True if the bit patterns have the same size. Never raises.

    Examples:
        >>> can_bit_cast(ir.VectorType(ir.FloatType(), 2), ir.IntType(64))
        True
        >>> can_bit_cast(ir.IntType(32), ir.IntType(64))
        False
    """
    if ty1 is ty2 or ty1 == ty2:
        return True

    if not (is_single_value_type(ty1) and is_single_value_type(ty2)):
        return False

    width1 = component_count(ty1) * scalar_bit_width(scalar_type(ty1))
    width2 = component_count(ty2) * scalar_bit_width(scalar_type(ty2))
    return width1 == width2
