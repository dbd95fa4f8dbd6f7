"""Data terms for Sprig: strings, numbers, symbols and lists.

Callable terms live in sprig.types.callables. Together they form the closed
Term union; nothing else is a runtime value.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Union, TYPE_CHECKING

if TYPE_CHECKING:
    from sprig.types.callables import Function, BuiltIn, SideEffector


class _Described:
    __slots__ = ()

    def __str__(self) -> str:
        from sprig.debug_utils.pprint import describe
        return describe(self)


@dataclass(frozen=True, slots=True)
class String(_Described):
    text: str


@dataclass(frozen=True, slots=True)
class Number(_Described):
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True, slots=True)
class Symbol(_Described):
    name: str

    def __post_init__(self):
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "name", sys.intern(self.name))


@dataclass(frozen=True, slots=True)
class List(_Described):
    items: tuple[Term, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


EMPTY = List(())

Term = Union[String, Number, Symbol, List, "Function", "BuiltIn", "SideEffector"]
