"""Standard built-in functions for the Sprig runtime environment.

Every entry here is a BuiltIn: it may hand back a new Environment, never new
host state. BuiltIns receive their argument terms unevaluated and evaluate
them themselves, threading the context left to right. Any host state change
made while evaluating an argument (by a side effector called inside it) is
dropped at the BuiltIn boundary along with the rest of the context.

Truth values: `#t` and `#f` are Symbols bound to themselves. Only `#f` and the
empty list are false.
"""
from __future__ import annotations

import operator
from typing import Callable

from sprig.errors import SprigArityError, SprigNativeError, SprigUnboundSymbol
from sprig.types.terms import String, Number, Symbol, List, EMPTY, Term
from sprig.types.callables import Function, BuiltIn
from sprig.types.context import Context
from sprig.types.environment import Environment
from sprig.evaluation.evaluator import evaluate, run

TRUE = Symbol("#t")
FALSE = Symbol("#f")

BuiltinResult = tuple[Environment, Term]


def truthy(term: Term) -> bool:
    return term != FALSE and term != EMPTY


def as_bool(flag: bool) -> Symbol:
    return TRUE if flag else FALSE


def _expect_arity(name: str, args: tuple[Term, ...], *allowed: int) -> None:
    if len(args) not in allowed:
        expected = " or ".join(str(n) for n in allowed)
        raise SprigArityError(f"{name} expected {expected} args, got {len(args)}")


def _expect_at_least(name: str, args: tuple[Term, ...], minimum: int) -> None:
    if len(args) < minimum:
        raise SprigArityError(f"{name} requires at least {minimum} args, got {len(args)}")


def _symbol_name(name: str, term: Term) -> str:
    if not isinstance(term, Symbol):
        raise SprigNativeError(f"{name} expected a symbol, got {term}")
    return term.name


def _eval_args(args: tuple[Term, ...], ctx: Context) -> tuple[Context, list[Term]]:
    """Evaluate each argument in order, threading the context."""
    values: list[Term] = []
    for arg in args:
        ctx, value = evaluate(arg, ctx)
        values.append(value)
    return ctx, values


def _numbers(name: str, values: list[Term]) -> list[float]:
    for v in values:
        if not isinstance(v, Number):
            raise SprigNativeError(f"all arguments to {name} must be numbers, got {v}")
    return [v.value for v in values]


# -------------------------------
# Binding and control
# -------------------------------
def define(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    """(define name expr): bind name to the value of expr."""
    _expect_arity("define", args, 2)
    name = _symbol_name("define", args[0])
    ctx, value = evaluate(args[1], ctx)
    return ctx.env.define(name, value), value


def set_builtin(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    """(set name expr): rebind a name that is already bound."""
    _expect_arity("set", args, 2)
    name = _symbol_name("set", args[0])
    ctx, value = evaluate(args[1], ctx)
    if name not in ctx.env:
        raise SprigUnboundSymbol(f"symbol not found: {name}")
    return ctx.env.define(name, value), value


def fn(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    """(fn (params...) body...): build a Function. Nothing is captured."""
    _expect_at_least("fn", args, 1)
    params = args[0]
    if not isinstance(params, List):
        raise SprigNativeError(f"fn expected a parameter list, got {params}")
    names = tuple(_symbol_name("fn", p) for p in params)
    return ctx.env, Function(names, args[1:])


def quote(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    _expect_arity("quote", args, 1)
    return ctx.env, args[0]


def if_builtin(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    """(if cond then [else]): a missing else branch yields the empty list."""
    _expect_arity("if", args, 2, 3)
    ctx, cond = evaluate(args[0], ctx)
    if truthy(cond):
        ctx, value = evaluate(args[1], ctx)
    elif len(args) == 3:
        ctx, value = evaluate(args[2], ctx)
    else:
        value = EMPTY
    return ctx.env, value


def do(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    ctx, value = run(args, ctx)
    return ctx.env, value


def eval_builtin(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    """(eval expr): evaluate expr, then evaluate the resulting term."""
    _expect_arity("eval", args, 1)
    ctx, form = evaluate(args[0], ctx)
    ctx, value = evaluate(form, ctx)
    return ctx.env, value


# -------------------------------
# Lists and strings
# -------------------------------
def list_builtin(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    ctx, values = _eval_args(args, ctx)
    return ctx.env, List(tuple(values))


def _one_list(name: str, args: tuple[Term, ...], ctx: Context) -> tuple[Context, List]:
    _expect_arity(name, args, 1)
    ctx, xs = evaluate(args[0], ctx)
    if not isinstance(xs, List):
        raise SprigNativeError(f"{name} expected a list, got {xs}")
    return ctx, xs


def first(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    """Return the first element of a list; the empty list for an empty list."""
    ctx, xs = _one_list("first", args, ctx)
    return ctx.env, xs.items[0] if xs.items else EMPTY


def rest(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    ctx, xs = _one_list("rest", args, ctx)
    return ctx.env, List(xs.items[1:])


def length(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    """(len x): number of elements of a list or characters of a string."""
    _expect_arity("len", args, 1)
    ctx, x = evaluate(args[0], ctx)
    if isinstance(x, List):
        return ctx.env, Number(len(x.items))
    if isinstance(x, String):
        return ctx.env, Number(len(x.text))
    raise SprigNativeError(f"len expected a list or string, got {x}")


def concat(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    ctx, values = _eval_args(args, ctx)
    for v in values:
        if not isinstance(v, String):
            raise SprigNativeError(f"all arguments to concat must be strings, got {v}")
    return ctx.env, String("".join(v.text for v in values))


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    ctx, values = _eval_args(args, ctx)
    return ctx.env, Number(sum(_numbers("+", values)))


def sub(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    _expect_at_least("-", args, 1)
    ctx, values = _eval_args(args, ctx)
    nums = _numbers("-", values)
    if len(nums) == 1:
        return ctx.env, Number(-nums[0])
    return ctx.env, Number(nums[0] - sum(nums[1:]))


def mul(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    ctx, values = _eval_args(args, ctx)
    result = 1.0
    for x in _numbers("*", values):
        result *= x
    return ctx.env, Number(result)


def div(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    """Divide left-to-right; with one arg returns the reciprocal."""
    _expect_at_least("/", args, 1)
    ctx, values = _eval_args(args, ctx)
    nums = _numbers("/", values)
    if len(nums) == 1:
        nums = [1.0] + nums
    result = nums[0]
    for x in nums[1:]:
        if x == 0:
            raise SprigNativeError("division by zero")
        result /= x
    return ctx.env, Number(result)


# -------------------------------
# Comparison and logic
# -------------------------------
def _comparison(name: str, op: Callable[[float, float], bool]):
    def compare(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
        _expect_at_least(name, args, 1)
        ctx, values = _eval_args(args, ctx)
        nums = _numbers(name, values)
        return ctx.env, as_bool(all(op(a, b) for a, b in zip(nums, nums[1:])))

    compare.__name__ = f"compare_{op.__name__}"
    compare.__doc__ = f"Chainable {name}: #t if the relation holds for every adjacent pair."
    return compare


def eq(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    """Structural equality of all arguments."""
    ctx, values = _eval_args(args, ctx)
    return ctx.env, as_bool(all(v == values[0] for v in values[1:]))


def logical_not(args: tuple[Term, ...], ctx: Context) -> BuiltinResult:
    _expect_arity("not", args, 1)
    ctx, value = evaluate(args[0], ctx)
    return ctx.env, as_bool(not truthy(value))


STANDARD_BUILTINS: dict[str, Callable[[tuple[Term, ...], Context], BuiltinResult]] = {
    "define": define,
    "set": set_builtin,
    "fn": fn,
    "quote": quote,
    "if": if_builtin,
    "do": do,
    "eval": eval_builtin,
    "list": list_builtin,
    "first": first,
    "rest": rest,
    "len": length,
    "concat": concat,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": _comparison("=", operator.eq),
    "<": _comparison("<", operator.lt),
    ">": _comparison(">", operator.gt),
    "<=": _comparison("<=", operator.le),
    ">=": _comparison(">=", operator.ge),
    "eq": eq,
    "not": logical_not,
}


def register(env: Environment) -> Environment:
    """Return a new environment with all standard builtins and constants bound."""
    bindings: dict[str, Term] = {
        name: BuiltIn(native, name) for name, native in STANDARD_BUILTINS.items()
    }
    bindings[TRUE.name] = TRUE
    bindings[FALSE.name] = FALSE
    return env.bind_all(bindings.items())
