"""Validation utilities for common checks in IR helpers.

This module provides reusable validation functions for the contract checks
the IR helpers perform before touching caller-owned IR. All validation
functions raise InternalError on failure, making them suitable for use in
assertions and precondition checks.

Common Usage:
    idx = require_index_in_range(idx, len(func.args), func.name)
    name = require_non_empty_name(name, "CE0102")
    block = require_builder_block(builder)
"""

from llvmlite import ir

from shaderir.internals.errors import raise_internal_error


def require_index_in_range(idx: int, count: int, owner: str = "") -> int:
    """Validate an index lies in [0, count) or raise CE0103.

    Negative indices are rejected rather than wrapped from the end.

    Args:
        idx: Index to validate.
        count: Number of elements in the indexed sequence.
        owner: Name of the owning function, used in the error message.

    Returns:
        The same index if in range.

    Raises:
        InternalError CE0103: If the index is out of range.

    Example:
        >>> arg = func.args[require_index_in_range(2, len(func.args), func.name)]
    """
    if not 0 <= idx < count:
        raise_internal_error("CE0103", index=idx, func=owner, count=count)
    return idx


def require_non_empty_name(name: str, error_code: str) -> str:
    """Validate a symbol name is non-empty or raise specified error.

    Args:
        name: Name to validate.
        error_code: Error code to raise if the name is empty (e.g., "CE0102").

    Returns:
        The same name if non-empty.

    Raises:
        InternalError: With the specified error code if the name is empty.
    """
    if not name:
        raise_internal_error(error_code)
    return name


def require_builder_block(builder: ir.IRBuilder) -> ir.Block:
    """Validate builder is positioned in a block or raise CE0106.

    Args:
        builder: IR builder to check.

    Returns:
        The block the builder inserts into.

    Raises:
        InternalError CE0106: If the builder has no block.
    """
    if builder.block is None:
        raise_internal_error("CE0106")
    return builder.block
