"""Envelopes shared by all routers."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Book not found"],
    )


class MessageResponse(BaseModel):
    """Confirmation body for operations that return no record."""

    message: str = Field(
        ...,
        examples=["Book deleted"],
    )
