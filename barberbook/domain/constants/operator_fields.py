"""Constants for Operator document field names"""


class OperatorFields:
    """Field name constants for Operator documents"""
    SHOP_ID = "shopId"
    NAME = "name"
    SERVICE_IDS = "servicesIds"
    WORKING_HOURS = "workingHours"

    MONGO_ID = "_id"
