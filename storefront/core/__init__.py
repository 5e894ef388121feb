from .config import Settings, get_settings
from .exceptions import InvalidArgumentError, NotFoundError, StorefrontError

__all__ = [
    "Settings",
    "get_settings",
    "StorefrontError",
    "NotFoundError",
    "InvalidArgumentError",
]
