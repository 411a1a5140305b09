"""
Error kinds raised by the translation services.

Route handlers map these onto HTTP responses; nothing here knows about HTTP.
"""


class ClientInputError(ValueError):
    """The caller sent input we refuse to forward (reported as 400)."""


class UpstreamError(RuntimeError):
    """The mapping provider could not be reached or answered with an unexpected shape (reported as 500)."""


class ConfigurationError(RuntimeError):
    """Startup configuration is incomplete; the process must not start serving."""
