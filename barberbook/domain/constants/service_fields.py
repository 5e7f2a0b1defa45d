"""Constants for Service document field names"""


class ServiceFields:
    """Field name constants for Service documents"""
    SHOP_ID = "shopId"
    NAME = "name"
    DURATION_MINUTES = "durationMinutes"
    PRICE = "price"

    MONGO_ID = "_id"
