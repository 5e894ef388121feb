from .product_fields import ProductFields
from .user_fields import UserFields

__all__ = ["ProductFields", "UserFields"]
