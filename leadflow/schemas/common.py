"""
Common schemas used across multiple endpoints.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for API payloads: camelCase on the wire, snake_case in Python."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
        use_enum_values = True
        validate_default = True


class MessageResponse(BaseModel):
    """Simple message response."""
    message: str

    class Config:
        json_schema_extra = {"example": {"message": "Operation successful"}}


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str

    class Config:
        json_schema_extra = {"example": {"detail": "An error occurred"}}


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str = "1.0.0"
