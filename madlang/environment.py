from typing import Any, Dict, Optional
from madlang.errors import UnboundReference
from madlang.types import to_string


class Environment:
    """A scope mapping identifiers to values, chained to its enclosing scope."""
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, Any] = {}

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __repr__(self) -> str:
        entries = ', '.join(f'{name} = {to_string(value)}' for name, value in self.values.items())
        return '{' + entries + '}'

    def declare(self, name: str, value: Any):
        # Redeclaring in the same scope overwrites; outer bindings are only shadowed
        self.values[name] = value

    def assign(self, name: str, value: Any):
        env = self
        while env is not None:
            if name in env:
                env.values[name] = value
                return
            env = env.parent
        raise UnboundReference(f'cannot assign to undeclared variable {name}')

    def lookup(self, name: str) -> Any:
        env = self
        while env is not None:
            if name in env:
                return env.values[name]
            env = env.parent
        raise UnboundReference(f'undefined variable {name}')
