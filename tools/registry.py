# =============================================================================
# tools/registry.py  —  Tool Registry
# =============================================================================
#
# Maps an operation name to {description, input model, handler}.
#
# LIFECYCLE:
#   1. build_registry() (tools/operations.py) creates an empty ToolRegistry
#   2. register() is called once per operation
#   3. freeze() is called; from then on the registry is read-only
#
# Nothing registers at import time.  A frozen registry can be shared between
# concurrent invocations without locking because nothing mutates it.
# =============================================================================

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Type

from pydantic import BaseModel

from tools.exceptions import DuplicateToolError, RegistryFrozenError


@dataclass(frozen=True)
class Operation:
    """A named, schema-typed callable exposed to the host."""

    name: str
    description: str
    input_model: Type[BaseModel]
    handler: Callable[[BaseModel], str]

    def input_schema(self) -> dict:
        """JSON schema advertised to the host for this operation's arguments."""
        return self.input_model.model_json_schema()


class ToolRegistry:
    """Name → Operation mapping, frozen after bootstrap."""

    def __init__(self) -> None:
        self._operations: dict[str, Operation] = {}
        self._frozen = False

    def register(self, operation: Operation) -> Operation:
        """Add an operation.

        Raises:
            RegistryFrozenError: If freeze() was already called.
            DuplicateToolError: If the name is taken.
        """
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register {operation.name!r}: registry is frozen")
        if operation.name in self._operations:
            raise DuplicateToolError(f"Tool already registered: {operation.name}")
        self._operations[operation.name] = operation
        return operation

    def freeze(self) -> "ToolRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, name: str) -> Optional[Operation]:
        return self._operations.get(name)

    def names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._operations)

    def __iter__(self) -> Iterator[Operation]:
        return iter(list(self._operations.values()))

    def __len__(self) -> int:
        return len(self._operations)

    def __contains__(self, name: object) -> bool:
        return name in self._operations
