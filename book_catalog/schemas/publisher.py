"""
Publisher Pydantic Schemas

Text fields are accepted as given: no length, uniqueness or format
rules apply beyond what the database itself rejects.
"""

from pydantic import BaseModel, ConfigDict, Field


class PublisherCreate(BaseModel):
    """Request body for POST /publishers."""

    name: str = Field(
        ...,
        description="Publisher name",
        examples=["Acme"],
    )

    address: str = Field(
        ...,
        description="Postal address",
        examples=["1 Rd"],
    )

    contact: str = Field(
        ...,
        description="Contact e-mail or phone",
        examples=["a@a.com"],
    )


class PublisherResponse(PublisherCreate):
    """A publisher row as returned by the API."""

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1],
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Acme",
                "address": "1 Rd",
                "contact": "a@a.com",
            }
        },
    )


class PublisherCreated(BaseModel):
    """Response body for POST /publishers."""

    message: str = "Publisher created"
    id: int
    publisher: PublisherResponse
