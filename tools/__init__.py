# =============================================================================
# tools/__init__.py
# =============================================================================
# The tool-invocation gateway: the registry of operations, the dispatcher
# that validates and runs them, and the FastMCP binding that exposes them
# over stdio.
#
# Dependency direction: tools/ imports core/, never the other way round.
# =============================================================================
