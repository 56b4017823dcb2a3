"""Function argument lookup for IR helpers."""
from __future__ import annotations

import re

from llvmlite import ir

from shaderir.backend.utils.validation import require_index_in_range

# llvmlite gives unnamed values a placeholder name of the form ".N"
_PLACEHOLDER_NAME = re.compile(r"\.\d+")


def has_placeholder_name(value: ir.NamedValue) -> bool:
    """Check if a value has no name of its own (empty or llvmlite's ".N")."""
    return not value.name or _PLACEHOLDER_NAME.fullmatch(value.name) is not None


def get_function_argument(func: ir.Function, idx: int, name: str = "") -> ir.Argument:
    """Get an argument of a function by index, naming it if still unnamed.

    The name is only given to an argument that has none yet, so repeated
    lookups never rename it. llvmlite may add a numeric suffix if the name
    is already taken in the function's scope.

    Args:
        func: The function owning the argument.
        idx: Index of the argument.
        name: Name to give the argument if it currently has none.

    Returns:
        The argument itself (still owned by func).

    Raises:
        InternalError CE0103: If idx is not in [0, len(func.args)).
    """
    require_index_in_range(idx, len(func.args), func.name)
    arg = func.args[idx]
    if name and has_placeholder_name(arg):
        arg.name = name
    return arg
