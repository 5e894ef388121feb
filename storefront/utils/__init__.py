from .key_lock import KeyedLock

__all__ = ["KeyedLock"]
