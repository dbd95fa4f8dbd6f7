# Core type aliases for Sprig's data model.
# Runtime values are the Term variants in sprig.types.terms and
# sprig.types.callables. Source handed to the reader is a generic atom tree:
# plain strings for tokens, nested lists for bracketed groups.
#
# Naming guidance:
# - AtomTree:  Use in reader code for the tokenizer's output (not yet Terms).
# - HostState: The embedding application's opaque world value. Never inspected.
# - NativeFn:  Signature shared by BuiltIn and SideEffector payloads.

import logging
from typing import Any, Callable, Union

# Tokenizer output: a bare token or a bracketed group of children
AtomTree = Union[str, list, tuple]

# Host-owned world value threaded through evaluation
HostState = Any

# Native callable: (argument terms, context) -> (env or context, result term)
NativeFn = Callable[..., tuple]

logging.getLogger(__name__).addHandler(logging.NullHandler())
