"""
IR builder with by-name calls to helper functions.

Helpers are declared lazily in the module the first time a call needs them;
later calls with the same name and signature reuse that declaration.
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from llvmlite import ir

from shaderir.backend.utils.validation import require_builder_block
from shaderir.internals.errors import raise_internal_error

logger = logging.getLogger(__name__)


class NamedCallBuilder(ir.IRBuilder):
    """IRBuilder that can call a function by name, declaring it if needed."""

    def get_or_declare_function(
        self,
        func_name: str,
        return_type: ir.Type,
        arg_types: Sequence[ir.Type],
        attrs: Iterable[str] = ()
    ) -> ir.Function:
        """Find the declaration of a named function, or declare it.

        Args:
            func_name: Symbol name of the function.
            return_type: LLVM return type.
            arg_types: LLVM argument types.
            attrs: Function attributes for a new declaration.

        Returns:
            The existing declaration with the same signature, or a new one.

        Raises:
            InternalError CE0104: If the name is taken by a global that is not
                a function with this exact signature.
        """
        module = require_builder_block(self).module
        fn_ty = ir.FunctionType(return_type, list(arg_types))

        existing = module.globals.get(func_name)
        if isinstance(existing, ir.Function) and existing.ftype == fn_ty:
            logger.debug("reusing declaration of %s", func_name)
            return existing
        if existing is not None:
            raise_internal_error("CE0104", name=func_name, existing=str(getattr(existing, "ftype", existing.type)), wanted=str(fn_ty))

        func = ir.Function(module, fn_ty, name=func_name)
        for attr in attrs:
            func.attributes.add(attr)
        logger.debug("declared %s: %s", func_name, fn_ty)
        return func

    def create_named_call(
        self,
        func_name: str,
        return_type: ir.Type,
        args: Sequence[ir.Value],
        attrs: Iterable[str] = ()
    ) -> ir.CallInstr:
        """Create a call to a function by name at the current position.

        Args:
            func_name: Symbol name of the function.
            return_type: LLVM return type.
            args: Argument values; their types form the signature.
            attrs: Attributes for the call site (and for the declaration,
                when one is created).

        Returns:
            The inserted call instruction.

        Raises:
            InternalError CE0104: If an incompatible global has this name.
        """
        attrs = tuple(attrs)
        func = self.get_or_declare_function(func_name, return_type, [arg.type for arg in args], attrs)
        return self.call(func, args, attrs=attrs)
