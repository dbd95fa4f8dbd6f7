"""Human-readable rendering of Terms for diagnostics.

The output is never read back; it only has to be deterministic.
"""

from __future__ import annotations

from io import StringIO

from sprig.types.terms import String, Number, Symbol, List, Term
from sprig.types.callables import Function, BuiltIn, SideEffector


def format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def describe(term: Term) -> str:
    match term:
        case String(text=text):
            return f'"{text}"'
        case Number(value=value):
            return format_number(value)
        case Symbol(name=name):
            return name
        case List(items=items):
            return "[" + ", ".join(describe(t) for t in items) + "]"
        case Function(params=params):
            return "fn(" + ", ".join(params) + ")"
        case BuiltIn():
            return "builtin"
        case SideEffector():
            return "sideeffector"
    return f"<not a term: {term!r}>"


def describe_env(env) -> str:
    """Render an Environment as {name: value, ...}, sorted by name."""
    with StringIO() as buffer:
        buffer.write("{")
        first = True
        for name in env.names():
            if not first:
                buffer.write(", ")
            buffer.write(f"{name}: {describe(env.lookup(name))}")
            first = False
        buffer.write("}")
        return buffer.getvalue()
