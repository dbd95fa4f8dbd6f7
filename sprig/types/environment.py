"""Runtime environment for Sprig.

The Environment maps names to Terms. It is persistent: `define` and
`bind_all` return a new Environment and leave the receiver untouched, so any
evaluation step still holding an older Environment keeps seeing it unchanged.
Dropping a derived Environment (for instance at the end of a function call)
needs no cleanup.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping, Optional

from sprig.errors import SprigUnboundSymbol
from sprig.types.terms import Term


class Environment:
    """Immutable mapping from names to Terms with copy-on-insert updates."""

    __slots__ = ("_vars",)

    def __init__(self, bindings: Optional[Mapping[str, Term]] = None):
        # Never mutated after construction
        self._vars: dict[str, Term] = dict(bindings) if bindings else {}

    def define(self, name: str, value: Term) -> Environment:
        """Return a new Environment with `name` bound to `value`."""
        return self.bind_all(((name, value),))

    def bind_all(self, pairs: Iterable[tuple[str, Term]]) -> Environment:
        """Return a new Environment with every (name, value) pair bound, later pairs winning."""
        new_vars = dict(self._vars)
        new_vars.update(pairs)
        env = Environment.__new__(Environment)
        env._vars = new_vars
        return env

    def lookup(self, name: str) -> Term:
        """Look up the value bound to `name`.

        Raises SprigUnboundSymbol if not found.
        """
        try:
            return self._vars[name]
        except KeyError:
            raise SprigUnboundSymbol(f"symbol not found: {name}") from None

    def get(self, name: str, default: Optional[Term] = None) -> Optional[Term]:
        return self._vars.get(name, default)

    def names(self) -> list[str]:
        return sorted(self._vars)

    def items(self):
        return self._vars.items()

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Environment) and self._vars == other._vars

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        from sprig.debug_utils.pprint import describe_env
        return describe_env(self)

    def __repr__(self) -> str:
        return f"<Environment {self}>"
