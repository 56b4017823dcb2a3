# shaderir/internals/errors.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, NoReturn


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Category(str, Enum):
    GENERAL   = "general"
    TYPE      = "type"
    FUNC      = "function"
    INTERNAL  = "internal"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    severity: Severity
    text: str
    category: Category = Category.GENERAL
    doc: str = ""


class InternalError(RuntimeError):
    """Contract violation inside the backend (a compiler bug, not bad input).

    Carries the registry code so callers can tell contract violations apart
    from ordinary control flow without parsing the message.
    """

    def __init__(self, code: str, text: str) -> None:
        super().__init__(f"{code}: {text}")
        self.code = code
        self.text = text


REGISTRY: Dict[str, ErrorMessage] = {}

class _ErrorCatalog:
    def __init__(self, backing: Dict[str, ErrorMessage]) -> None:
        self._registry = backing

    def __getattr__(self, name: str) -> ErrorMessage:
        try:
            return self._registry[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __getitem__(self, code: str) -> ErrorMessage:
        return self._registry[code]


ERR = _ErrorCatalog(REGISTRY)

def raise_internal_error(code: str, **kwargs) -> NoReturn:
    """Raise an InternalError for a violated backend contract.

    Internal errors (CE codes) indicate compiler bugs, not user code issues.
    The operation that detects one is abandoned; nothing partial is returned.

    Args:
        code: Error code (e.g., "CE0101")
        **kwargs: Format parameters for the error message

    Raises:
        InternalError: Always raises with formatted error message
    """
    raise InternalError(code, _fmt(code, **kwargs))


#
# --- Helpers
#

def _add(msg: ErrorMessage) -> None:
    if msg.code in REGISTRY:
        raise ValueError(f"duplicate error code {REGISTRY[msg.code]} in {msg}")
    REGISTRY[msg.code] = msg

def _get(code: str) -> ErrorMessage:
    try:
        return REGISTRY[code]
    except KeyError:
        raise KeyError(f"unknown error code: {code}")

def _fmt(code: str, **kwargs) -> str:
    msg = _get(code)
    try:
        return msg.text.format(**kwargs)
    except KeyError as key_error:
        missing = key_error.args[0]
        raise KeyError(f"missing text key '{missing}' for {code} "
                       f"(needed by: {msg.text!r})") from None

#
# --- Registry population
#

# IR utility contract violations - CE01xx range
_add(ErrorMessage("CE0101", Severity.ERROR,
    "cannot encode type '{type}' in a mangled name",
    Category.INTERNAL, "Only pointer, array, struct, vector, integer, floating-point and void types have a name encoding."))

_add(ErrorMessage("CE0102", Severity.ERROR,
    "cannot mangle an empty base name",
    Category.INTERNAL, "Mangling appends type suffixes to a base symbol; the base symbol must not be empty."))

_add(ErrorMessage("CE0103", Severity.ERROR,
    "argument index {index} out of range for function '{func}' with {count} argument(s)",
    Category.FUNC, "Function argument lookups must use an index in [0, argument count)."))

_add(ErrorMessage("CE0104", Severity.ERROR,
    "cannot resolve declaration of '{name}': existing global has type '{existing}', call needs '{wanted}'",
    Category.FUNC, "A named call must match the signature of any existing declaration with the same name."))

_add(ErrorMessage("CE0105", Severity.ERROR,
    "unsupported call insertion point '{pos}'",
    Category.INTERNAL, "Calls are inserted either before an instruction or at the end of a basic block."))

_add(ErrorMessage("CE0106", Severity.ERROR,
    "builder is not positioned in a basic block",
    Category.INTERNAL, "IR builder has no block - position it before emitting a call."))
