from __future__ import annotations

# Public surface for the evaluator
from .evaluator import evaluate, run
from .apply import apply_function, call_builtin, call_side_effector

__all__ = [
    "evaluate",
    "run",
    "apply_function",
    "call_builtin",
    "call_side_effector",
]
