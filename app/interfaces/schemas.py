"""
Pydantic schemas shared by every router.

All request/response models derive from `CamelModel`: Python code uses
snake_case, the JSON contract uses camelCase.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys; accepts either form on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Standard error envelope returned by the error handlers."""

    error: str
    detail: str | None = None


class MessageResponse(CamelModel):
    """A bare confirmation message."""

    message: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
