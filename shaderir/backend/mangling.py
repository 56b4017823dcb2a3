"""
Type mangling for synthesized helper-function names.

A helper whose exact signature is only known at the call site is named by
appending the canonical names of its return and argument types to a base
symbol, e.g. "foo." returning i32 and taking a float gives "foo.i32.f32". Identical
inputs always give identical names, so the name can be used to find a helper
that was already declared.
"""
from __future__ import annotations

import io
from typing import Iterable, Optional

from llvmlite import ir

from shaderir.backend.constants import MANGLE_SEPARATOR
from shaderir.backend.type_names import write_type_name
from shaderir.backend.utils.validation import require_non_empty_name


def mangle(base_name: str, return_type: Optional[ir.Type], arg_types: Iterable[ir.Type]) -> str:
    """Append type suffixes for a signature to a base symbol name.

    A single trailing "." on the base name is dropped first, since callers
    may end the name with "." to say that mangling follows and every suffix
    starts with "." already. A missing or void return type adds no suffix.

    Args:
        base_name: Base symbol name. Must not be empty.
        return_type: Return type, or None.
        arg_types: Argument types, in order.

    Returns:
        The mangled name.

    Raises:
        InternalError CE0102: If base_name is empty.
        InternalError CE0101: If any type has no encoding.

    Examples:
        >>> mangle("foo.", ir.IntType(32), [ir.FloatType()])
        'foo.i32.f32'
        >>> mangle("bar", ir.VoidType(), [])
        'bar'
    """
    require_non_empty_name(base_name, "CE0102")
    if base_name.endswith(MANGLE_SEPARATOR):
        base_name = base_name[:-1]

    stream = io.StringIO()
    stream.write(base_name)
    if return_type is not None and not isinstance(return_type, ir.VoidType):
        stream.write(MANGLE_SEPARATOR)
        write_type_name(return_type, stream)

    for arg_type in arg_types:
        stream.write(MANGLE_SEPARATOR)
        write_type_name(arg_type, stream)

    return stream.getvalue()


def add_type_mangling(return_type: Optional[ir.Type], args: Iterable[ir.Value], name: str) -> str:
    """Mangle a name for a call on the given argument values.

    Same as `mangle`, but takes the argument values a caller is about to
    pass and uses their types.

    Args:
        return_type: Return type, or None.
        args: Argument values, in order.
        name: Base symbol name.

    Returns:
        The mangled name.
    """
    return mangle(name, return_type, (arg.type for arg in args))
