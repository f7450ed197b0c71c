"""
API request and response models.

Pydantic models for request decoding and OpenAPI schema generation.
Constraint checking is left to the domain validator; these models only
decode the transport format into typed values.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class ProductRequest(BaseModel):
    """
    JSON body for product creation.

    Strict types: a string where an integer is expected is a decoding
    error, not a coercion. Missing keys and null values fall back to the
    empty value and unknown keys are ignored.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str = Field("", description="Product name (3-10 characters)")
    price: int = Field(0, description="Price (1000000-100000000)")
    stock: int = Field(0, description="Units in stock (1-100)")

    @field_validator("name", "price", "stock", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any, info: ValidationInfo) -> Any:
        """Treat JSON null like a missing key."""
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class ProductCreated(BaseModel):
    """Payload returned for a created product."""

    name: str
    price: int


class EndpointResponse(BaseModel):
    """Standard response envelope."""

    code: int
    msg: str
    data: Any = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    schemas: list[str]
