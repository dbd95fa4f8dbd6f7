from __future__ import annotations

from dataclasses import dataclass, field

from sprig import HostState
from sprig.types.environment import Environment


@dataclass(frozen=True)
class Context:
    """The (Environment, HostState) pair threaded through evaluation.

    `state` belongs to the host and is only ever passed along, never inspected.
    """

    env: Environment = field(default_factory=Environment)
    state: HostState = None

    def with_env(self, env: Environment) -> Context:
        return Context(env, self.state)
