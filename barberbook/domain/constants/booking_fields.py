"""Constants for Booking document field names"""


class BookingFields:
    """Field name constants for Booking documents"""
    SHOP_ID = "shopId"
    CUSTOMER_NAME = "customerName"
    CUSTOMER_PHONE = "customerPhone"
    SERVICE_ID = "serviceId"
    OPERATOR_ID = "operatorId"
    START_TIME = "startTime"
    END_TIME = "endTime"
    NOTES = "notes"

    MONGO_ID = "_id"
