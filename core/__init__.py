# =============================================================================
# core/__init__.py
# =============================================================================
# Provider-facing logic: configuration, the HTTP fetch adapter, data models,
# text formatting, and the weather / image-generation flows.
#
# Nothing in this package imports FastMCP or pydantic.  Everything here can
# be exercised with a mocked requests.Session and no MCP host.
# =============================================================================
