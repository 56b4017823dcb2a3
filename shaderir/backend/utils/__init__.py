"""Backend utilities package.

This package contains reusable utility functions for the LLVM backend,
organized by concern:

- validation: Common precondition checks (index range, names, builder)
"""

from .validation import (
    require_builder_block,
    require_index_in_range,
    require_non_empty_name,
)

__all__ = [
    'require_builder_block',
    'require_index_in_range',
    'require_non_empty_name',
]
