from __future__ import annotations

import logging
from typing import Literal

from sprig import AtomTree, HostState, NativeFn
from sprig.config import stdlib_enabled
from sprig.reader.literal import read_forms
from sprig.types.terms import Term
from sprig.types.callables import BuiltIn, SideEffector
from sprig.types.context import Context
from sprig.types.environment import Environment
from sprig.evaluation.evaluator import run
from sprig.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Host-side facade: reads atom trees and evaluates them, holding the
    current Context (environment and host state) across calls.
    The held context is only replaced when an evaluation succeeds.
    """

    def __init__(
        self,
        state: HostState = None,
        *,
        stdlib: bool | Literal['auto'] = 'auto',
    ):
        env = Environment()
        if stdlib == 'auto':
            stdlib = stdlib_enabled()
        if stdlib:
            env = register(env)
        self.context: Context = Context(env, state)

    @property
    def env(self) -> Environment:
        return self.context.env

    @property
    def state(self) -> HostState:
        return self.context.state

    def define(self, name: str, value: Term) -> None:
        self.context = self.context.with_env(self.env.define(name, value))

    def register_builtin(self, name: str, fn: NativeFn) -> None:
        self.define(name, BuiltIn(fn, name))

    def register_side_effector(self, name: str, fn: NativeFn) -> None:
        self.define(name, SideEffector(fn, name))

    def eval(self, *trees: AtomTree) -> Term:
        """Read and run top-level atom trees; return the last value."""
        terms = read_forms(trees)
        logger.debug("running %d top-level forms", len(terms))
        self.context, result = run(terms, self.context)
        return result
