# =============================================================================
# core/exceptions.py  —  Provider failure taxonomy
# =============================================================================
#
# Every expected failure of a provider flow (weather, image generation) is
# raised as a ProviderError subclass.  The message IS the text the host
# application will see: the tool dispatcher turns these into a normal text
# result instead of a protocol error.
# =============================================================================


class ProviderError(Exception):
    """Base class for expected provider-side failures."""


class UpstreamUnavailableError(ProviderError):
    """The provider could not be reached, answered non-OK, or sent bad JSON."""


class UpstreamLogicalError(ProviderError):
    """The provider answered but reported an error of its own."""


class MissingCredentialError(ProviderError):
    """A credential required by one operation is not configured."""


class ConfigError(Exception):
    """Invalid process configuration (raised at bootstrap only)."""
