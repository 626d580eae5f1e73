from typing import Any, Dict, Optional

from .errors import LoxRuntimeError
from .tokens import Token


class Environment:
    """A scope mapping variable names to values, linked to its enclosing scope."""
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, Any] = {}

    def define(self, name: str, value: Any) -> None:
        # Redefinition in the same scope is allowed
        self.values[name] = value

    def get(self, name: Token) -> Any:
        env = self.resolve(name)
        return env.values[name.lexeme]

    def assign(self, name: Token, value: Any) -> None:
        env = self.resolve(name)
        env.values[name.lexeme] = value

    def resolve(self, name: Token) -> 'Environment':
        """Return the innermost scope that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name.lexeme in env.values:
                return env
            env = env.parent
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def __contains__(self, name: str) -> bool:
        return name in self.values
