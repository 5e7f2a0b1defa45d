"""Constants for Shop document field names"""


class ShopFields:
    """Field name constants for Shop documents"""
    OWNER_USER_ID = "ownerUserId"
    NAME = "name"
    CREATED_AT = "createdAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
