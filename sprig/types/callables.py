"""Callable terms for Sprig, one variant per effect tier.

- Function:     user-defined, parameters + body. A call is context-opaque.
- BuiltIn:      native, may return a new Environment but never new host state.
- SideEffector: native, may return a whole new Context (environment and host state).

The evaluator tells the tiers apart by variant, never by calling a method on
them, so the capability boundary is enforced in one place (sprig.evaluation).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sprig import NativeFn
from sprig.types.terms import _Described, Term


@dataclass(frozen=True, slots=True)
class Function(_Described):
    """A first-class function: formal parameter names and body terms.

    No environment is captured. Free names in the body resolve against the
    caller's environment at call time (dynamic scoping), see
    sprig.evaluation.apply.apply_function.
    """

    params: tuple[str, ...]
    body: tuple[Term, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "params", tuple(self.params))
        object.__setattr__(self, "body", tuple(self.body))

    @property
    def arity(self) -> int:
        return len(self.params)


@dataclass(frozen=True, slots=True)
class BuiltIn(_Described):
    """Native callable: fn(args, ctx) -> (Environment, Term)."""

    fn: NativeFn
    name: str = field(default="", compare=False)


@dataclass(frozen=True, slots=True)
class SideEffector(_Described):
    """Native callable: fn(args, ctx) -> (Context, Term)."""

    fn: NativeFn
    name: str = field(default="", compare=False)
