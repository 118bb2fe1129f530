"""Tool-layer exceptions."""


class ToolError(Exception):
    """Base exception for tool operations."""


class ToolNotFoundError(ToolError):
    """Tool name not recognized."""


class ToolValidationError(ToolError):
    """Tool arguments failed validation."""


class DuplicateToolError(ToolError):
    """A tool with the same name is already registered."""


class RegistryFrozenError(ToolError):
    """The registry no longer accepts registrations."""
