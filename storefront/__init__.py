"""
Storefront
==========

Business-rule validation for products and users, sitting between an API
surface and a storage backend.
"""
__version__ = "1.0.0"
