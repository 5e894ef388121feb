"""Constants for Product model field names"""


class ProductFields:
    """Field name constants for Product model"""
    ID = "id"
    NAME = "name"
    PRICE = "price"
    STOCK = "stock"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
