"""
Service Errors
==============

Error kinds raised by the service layer. Adapters translate them into
their own outcomes (HTTP status codes, boolean flags).
"""


class StorefrontError(Exception):
    """Base class for all service-layer errors."""


class NotFoundError(StorefrontError):
    """The referenced entity does not resolve in storage."""


class InvalidArgumentError(StorefrontError, ValueError):
    """A business rule was violated. The message names the rule."""
