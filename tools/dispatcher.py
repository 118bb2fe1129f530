"""Tool dispatcher: validate arguments, run the handler, wrap the outcome."""

import logging
import time
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from core.exceptions import ProviderError
from tools.exceptions import ToolError, ToolNotFoundError, ToolValidationError
from tools.registry import Operation, ToolRegistry
from tools.result import ToolResult

LOGGER = logging.getLogger(__name__)


def format_validation_error(tool_name: str, exc: ValidationError) -> str:
    """One clause per failing field: "<field>: <reason>"."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "arguments"
        problems.append(f"{location}: {error.get('msg', 'invalid value')}")
    return f"Invalid arguments for {tool_name}: " + "; ".join(problems)


class ToolDispatcher:
    """Route tool calls to registered operations.

    invoke() never raises for anything a handler does: unknown names,
    invalid arguments, provider failures and unexpected exceptions all come
    back as a text ToolResult with is_error set.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        """
        Args:
            registry: Populated registry. It is frozen here if the caller
                has not already done so.
        """
        self._registry = registry.freeze()

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def get_operation(self, name: str) -> Operation:
        """Raises ToolNotFoundError for unregistered names."""
        operation = self._registry.lookup(name)
        if operation is None:
            raise ToolNotFoundError(f"Unknown tool: {name}")
        return operation

    def validate_arguments(self, operation: Operation, raw_args: Optional[Mapping[str, Any]]) -> BaseModel:
        """Check raw arguments against the operation's input model.

        Raises:
            ToolValidationError: Missing field, wrong type, or out-of-range value.
        """
        args = {} if raw_args is None else raw_args
        if isinstance(args, Mapping):
            args = dict(args)
        try:
            return operation.input_model.model_validate(args)
        except ValidationError as exc:
            raise ToolValidationError(format_validation_error(operation.name, exc)) from exc

    def invoke(self, name: str, raw_args: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """
        Execute one tool call.

        Args:
            name: Operation name as sent by the host.
            raw_args: Untyped argument mapping. None is treated as {}.

        Returns: ToolResult with exactly one text block.
        """
        LOGGER.info("Tool call: %s", name)

        try:
            operation = self.get_operation(name)
            validated = self.validate_arguments(operation, raw_args)
        except ToolError as exc:
            LOGGER.warning("Tool error: %s code=%s: %s", name, type(exc).__name__, exc)
            return ToolResult.text(name, str(exc), is_error=True)

        started = time.perf_counter()
        try:
            text = operation.handler(validated)
        except ProviderError as exc:
            LOGGER.warning("Tool error: %s code=%s: %s", name, type(exc).__name__, exc)
            return ToolResult.text(name, str(exc), is_error=True)
        except Exception as exc:
            LOGGER.exception("Tool exception: %s", name)
            return ToolResult.text(name, f"Error executing tool {name}: {exc}", is_error=True)

        elapsed_ms = (time.perf_counter() - started) * 1000
        LOGGER.debug("Tool success: %s (%.0f ms)", name, elapsed_ms)
        return ToolResult.text(name, text)
