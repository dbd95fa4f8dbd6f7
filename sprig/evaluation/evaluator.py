"""Core evaluator for Sprig.

`evaluate` reduces one Term against a Context and returns the successor
Context with the result. `run` folds over a sequence of top-level Terms.
Failures are raised as SprigError and are never caught here, so the first
failure aborts the whole enclosing evaluation.

Note the scoping model: Functions capture nothing, and a call binds its
parameters into the caller's environment (see apply.apply_function). Names in
a Function body are therefore resolved dynamically, against whatever is
visible at the call site. This is intentional; do not turn Functions into
lexical closures.
"""

from __future__ import annotations

from typing import Iterable

from sprig.types.terms import String, Number, Symbol, List, Term
from sprig.types.callables import Function, BuiltIn, SideEffector
from sprig.types.context import Context
from sprig.evaluation.apply import (
    apply_function,
    call_builtin,
    call_side_effector,
    run_sequence,
)


def evaluate(term: Term, ctx: Context) -> tuple[Context, Term]:
    match term:
        case String() | Number() | Function() | BuiltIn() | SideEffector():
            return ctx, term
        case Symbol(name=name):
            return ctx, ctx.env.lookup(name)
        case List(items=()):
            return ctx, term
        case List(items=(head, *rest)):
            ctx, callee = evaluate(head, ctx)
            args = tuple(rest)
            match callee:
                case Function():
                    # Context-opaque: whatever the body did stays inside the call
                    _, result = apply_function(callee, args, ctx, evaluate)
                    return ctx, result
                case BuiltIn():
                    return call_builtin(callee, args, ctx)
                case SideEffector():
                    return call_side_effector(callee, args, ctx)
                case _:
                    # Head wins: a non-callable head is the value, rest is never evaluated
                    return ctx, callee
    raise TypeError(f"not a term: {term!r}")


def run(terms: Iterable[Term], ctx: Context) -> tuple[Context, Term]:
    """Evaluate top-level terms in order; the empty sequence yields the empty list."""
    return run_sequence(terms, ctx, evaluate)
