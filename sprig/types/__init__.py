from __future__ import annotations

# Public surface for the term model
from .terms import String, Number, Symbol, List, EMPTY, Term
from .callables import Function, BuiltIn, SideEffector
from .environment import Environment
from .context import Context

__all__ = [
    "String",
    "Number",
    "Symbol",
    "List",
    "EMPTY",
    "Term",
    "Function",
    "BuiltIn",
    "SideEffector",
    "Environment",
    "Context",
]
