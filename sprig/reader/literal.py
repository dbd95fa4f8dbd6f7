"""
  Sprig literal reader

Turns the output of an external tokenizer into Terms. The tokenizer has
already matched brackets and quotes; what arrives here is an atom tree:

    - token  -> str
    - group  -> list (or tuple) of child atom trees

A token is tried against three grammars in order; the first one that matches
the *whole* token wins:

    - quoted string -> String   "..." with no '"' inside, no escape processing
    - number        -> Number   decimal floating-point literal
    - symbol        -> Symbol   any non-empty run of non-'"' characters

Because symbol is the fallback, a malformed number such as 3.5.2 reads as a
Symbol rather than failing.
"""

from __future__ import annotations

import re
from typing import Iterable

from sprig import AtomTree
from sprig.errors import SprigSyntaxError
from sprig.types.terms import String, Number, Symbol, List, Term


STRING_RE = re.compile(r'"(?P<text>[^"]*)"')
NUMBER_RE = re.compile(
    r"[+-]?"
    r"(?:\d+(?:\.\d*)?|\.\d+)"  # mantissa: 1, 1., 1.5, .5
    r"(?:[eE][+-]?\d+)?"  # optional exponent
)
SYMBOL_RE = re.compile(r'[^"]+')


def read_atom(token: str) -> Term:
    """Read a single bare token into a String, Number or Symbol."""
    if not isinstance(token, str):
        raise SprigSyntaxError(f"expected a token, got {token!r}")
    if m := STRING_RE.fullmatch(token):
        return String(m.group("text"))
    if NUMBER_RE.fullmatch(token):
        return Number(float(token))
    if SYMBOL_RE.fullmatch(token):
        return Symbol(token)
    raise SprigSyntaxError(f"invalid token: {token!r}")


def read_tree(tree: AtomTree) -> Term:
    """Read an atom tree; groups become Lists of their children, in order."""
    if isinstance(tree, str):
        return read_atom(tree)
    if isinstance(tree, (list, tuple)):
        return List(tuple(read_tree(child) for child in tree))
    raise SprigSyntaxError(f"invalid atom tree fragment: {tree!r}")


def read_forms(trees: Iterable[AtomTree]) -> list[Term]:
    """Read a top-level sequence of atom trees."""
    return [read_tree(tree) for tree in trees]
