"""
Pydantic schemas for directory contacts.

A contact is keyed by its ``email`` address; the remaining fields are
free‑form strings.  The creation timestamp is exposed to clients as
``createdAt`` while Python code uses ``created_at``.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContactCreate(BaseModel):
    """Schema for the body of a create request.

    Unknown fields are rejected.  Missing or ``null`` fields fall back
    to empty strings.  ``createdAt`` is accepted so that clients may echo a
    previously read contact, but the server stamps its own time.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    email: str = ""
    address: str = ""
    mobile: str = ""
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    @field_validator("name", "email", "address", "mobile", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v


class ContactCreated(BaseModel):
    """Schema returned after a successful create."""

    email: str


class Contact(BaseModel):
    """Schema for a stored contact."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: str
    address: str
    mobile: str
    created_at: datetime = Field(..., alias="createdAt")
