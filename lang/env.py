"""Name to Expression bindings consulted during evaluation."""

from typing import Mapping, Optional

from .builtins import BUILTINS
from .errors import EvalError
from .types import Expression


class Environment:
    """A mutable frame of bindings with an optional parent frame.

    Lookups fall through to the parent chain; `bind` always writes this frame.
    """

    def __init__(
        self,
        bindings: Optional[Mapping[str, Expression]] = None,
        parent: Optional["Environment"] = None,
    ):
        self.data: dict[str, Expression] = dict(bindings or {})
        self.parent = parent

    def lookup(self, name: str) -> Expression:
        env: Optional[Environment] = self
        while env is not None:
            if name in env.data:
                return env.data[name]
            env = env.parent
        raise EvalError(f"undefined symbol {name}")

    def bind(self, name: str, value: Expression) -> None:
        self.data[name] = value

    def __contains__(self, name: str) -> bool:
        try:
            self.lookup(name)
        except EvalError:
            return False
        return True

    def __repr__(self) -> str:
        return f"Environment({sorted(self.data)!r}, parent={self.parent is not None})"


def default_env() -> Environment:
    """A fresh environment seeded with the built-in procedures."""
    return Environment({p.name: p for p in BUILTINS})
