"""Application engine for Sprig.

This module centralizes call semantics for the three callable tiers:
- Function: arguments evaluated independently, parameters bound into the
  caller's environment, body run in sequence. The caller keeps its own
  context afterwards (context-opaque call).
- BuiltIn: native code may hand back a new Environment only; the host state
  is always carried over from before the call.
- SideEffector: native code hands back a whole new Context.

Keeping this logic in one place keeps the capability boundary in one place.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from sprig.errors import SprigError, SprigArityError, SprigNativeError
from sprig.types.terms import EMPTY, Term
from sprig.types.callables import Function, BuiltIn, SideEffector
from sprig.types.context import Context
from sprig.types.environment import Environment

logger = logging.getLogger(__name__)

EvaluatorFn = Callable[[Term, Context], tuple[Context, Term]]


def run_sequence(
    terms: Iterable[Term], ctx: Context, evaluate_fn: EvaluatorFn
) -> tuple[Context, Term]:
    """Evaluate terms left to right, threading the context; the last value wins."""
    result: Term = EMPTY
    for term in terms:
        ctx, result = evaluate_fn(term, ctx)
    return ctx, result


def apply_function(
    fn: Function, args: Iterable[Term], ctx: Context, evaluate_fn: EvaluatorFn
) -> tuple[Context, Term]:
    """Apply a user-defined Function to unevaluated argument terms.

    Parameters:
    - fn: The Function being applied.
    - args: The argument terms from the call site, not yet evaluated.
    - ctx: The caller's context at the call site.
    - evaluate_fn: Evaluator used for the arguments and the body.

    Behavior:
    - Every argument is evaluated against `ctx` itself; whatever an argument
      does to the environment or host state is dropped, only its value is kept.
    - Parameters are bound into the caller's environment, not a definition-time
      one. Name resolution in the body is therefore dynamic: the body sees
      every binding visible at the call site, and parameters shadow
      same-named caller bindings for the duration of the call.
    - Returns the context at the end of the body with the last body value.
      Callers discard that context.
    """
    values = [evaluate_fn(arg, ctx)[1] for arg in args]
    if len(values) != fn.arity:
        raise SprigArityError(
            f"function {fn} expected {fn.arity} args, got {len(values)}"
        )
    call_env = ctx.env.bind_all(zip(fn.params, values))
    logger.debug("calling fn(%s) with %d args", ", ".join(fn.params), len(values))
    return run_sequence(fn.body, Context(call_env, ctx.state), evaluate_fn)


def _label(callee: BuiltIn | SideEffector) -> str:
    return callee.name or "<anonymous>"


def _call_native(kind: str, callee: BuiltIn | SideEffector, args: tuple[Term, ...], ctx: Context):
    logger.debug("calling %s %s with %d args", kind, _label(callee), len(args))
    try:
        result = callee.fn(args, ctx)
    except (SprigError, RecursionError):
        raise
    except Exception as exc:
        raise SprigNativeError(f"{kind} {_label(callee)} failed: {exc}") from exc
    if not isinstance(result, tuple) or len(result) != 2:
        raise SprigNativeError(f"{kind} {_label(callee)} must return a pair, got {result!r}")
    return result


def call_builtin(callee: BuiltIn, args: tuple[Term, ...], ctx: Context) -> tuple[Context, Term]:
    """Invoke a BuiltIn; only its Environment survives, host state is kept from `ctx`."""
    new_env, result = _call_native("builtin", callee, args, ctx)
    if isinstance(new_env, Context):
        if new_env.state is not ctx.state:
            logger.warning(
                "builtin %s tried to replace host state; change discarded",
                _label(callee),
            )
        new_env = new_env.env
    if not isinstance(new_env, Environment):
        raise SprigNativeError(
            f"builtin {_label(callee)} must return an Environment, got {new_env!r}"
        )
    return Context(new_env, ctx.state), result


def call_side_effector(
    callee: SideEffector, args: tuple[Term, ...], ctx: Context
) -> tuple[Context, Term]:
    """Invoke a SideEffector; its Context is carried forward as is."""
    new_ctx, result = _call_native("sideeffector", callee, args, ctx)
    if not isinstance(new_ctx, Context):
        raise SprigNativeError(
            f"sideeffector {_label(callee)} must return a Context, got {new_ctx!r}"
        )
    return new_ctx, result
