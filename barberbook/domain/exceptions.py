"""
Domain Exceptions
=================

Error taxonomy shared by all layers. Every error carries the HTTP status
it maps to and the message that is safe to show to a client; anything
more detailed is logged where the error is raised.
"""
from typing import Optional


class BookingBackendError(Exception):
    """Base class for every failure the API turns into an error envelope."""

    status_code: int = 500
    public_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.public_message
        super().__init__(self.message)


class ValidationFailure(BookingBackendError):
    """Client supplied a missing or malformed field."""

    status_code = 400

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class NotFound(BookingBackendError):
    """A client-supplied id does not reference an existing entity."""

    status_code = 400

    def __init__(self, entity: str, entity_id: str, message: Optional[str] = None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f"{entity} not found")


class ServiceNotFound(NotFound):
    def __init__(self, service_id: str) -> None:
        super().__init__("Service", service_id, "Service not found")


class DataIntegrityFailure(BookingBackendError):
    """Stored data violates an invariant the pipeline relies on."""

    status_code = 500


class InvalidServiceConfiguration(DataIntegrityFailure):
    public_message = "Invalid service configuration"

    def __init__(self, shop_id: str, service_id: str) -> None:
        self.shop_id = shop_id
        self.service_id = service_id
        super().__init__()


class StoreFailure(BookingBackendError):
    """The persistence layer could not complete an operation."""

    status_code = 500

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__()
