from .container import DIContainer, get_container, init_container, reset_container

__all__ = ["DIContainer", "get_container", "init_container", "reset_container"]
