"""
API v1 Package
===============

Version 1 API controllers.
"""
from .product_controller import router as product_router
from .user_controller import router as user_router

__all__ = ["product_router", "user_router"]
