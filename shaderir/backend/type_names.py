"""
Canonical type names for mangling helper-function symbols.

Every LLVM type that can appear in a helper signature gets a short,
deterministic name. Callers append these names to a base symbol so that one
helper can be synthesized per distinct signature and found again by name.

Encoding:
-------------------------
- pointer:       p<addrspace> followed by the pointee's name
- array:         a<count> followed by the element's name
- struct:        s[<elem>,<elem>,...]   (s[] when empty or opaque)
- vector:        v<count> followed by the element's scalar name
- floating point f<width>
- integer:       i<width>
- void:          V

Example: a pointer in address space 1 to [4 x float] is "p1a4f32".

The encoding is only meant to be unique within one compilation, it is not a
serialization format and is not parsed back.
"""
from __future__ import annotations

import io
from typing import TextIO

from llvmlite import ir

from shaderir.backend.constants import FLOAT_BIT_WIDTHS
from shaderir.internals.errors import raise_internal_error


def write_type_name(ty: ir.Type, stream: TextIO) -> None:
    """Write the canonical name of a type to a stream.

    Pointer and array wrappers are peeled iteratively, outermost first;
    struct elements are named by recursion.

    Args:
        ty: Type to name.
        stream: Text stream the name is appended to.

    Raises:
        InternalError CE0101: If the type (or a type nested in it) has no
            encoding, e.g. a label, metadata or function type.
    """
    while True:
        if isinstance(ty, ir.PointerType):
            stream.write(f"p{ty.addrspace}")
            if ty.is_opaque:
                return
            ty = ty.pointee
            continue
        if isinstance(ty, ir.ArrayType):
            stream.write(f"a{ty.count}")
            ty = ty.element
            continue
        break

    if isinstance(ty, ir.BaseStructType):
        stream.write("s[")
        for i, elem in enumerate(ty.elements or ()):
            if i:
                stream.write(",")
            write_type_name(elem, stream)
        stream.write("]")
        return

    if isinstance(ty, ir.VectorType):
        stream.write(f"v{ty.count}")
        ty = ty.element

    float_width = FLOAT_BIT_WIDTHS.get(type(ty))
    if float_width is not None:
        stream.write(f"f{float_width}")
    elif isinstance(ty, ir.IntType):
        stream.write(f"i{ty.width}")
    elif isinstance(ty, ir.VoidType):
        stream.write("V")
    else:
        raise_internal_error("CE0101", type=str(ty))


def get_type_name(ty: ir.Type) -> str:
    """Get the canonical name of a type.

    Args:
        ty: Type to name.

    Returns:
        The encoded name, e.g. "v4i8" for <4 x i8>.

    Raises:
        InternalError CE0101: If the type has no encoding. No partial name
            is returned.
    """
    stream = io.StringIO()
    write_type_name(ty, stream)
    return stream.getvalue()
