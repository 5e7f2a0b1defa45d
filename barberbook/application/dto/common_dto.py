"""
Common DTO
==========

Envelopes shared by every endpoint.
"""
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every failed request."""
    error: str

    class Config:
        json_schema_extra = {"example": {"error": "shopId is required and must be a non-empty string"}}


class HealthResponse(BaseModel):
    status: str = "ok"
