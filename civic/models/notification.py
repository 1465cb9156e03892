"""Pending status-change message shown on the next boot."""

from pydantic import BaseModel, Field


class Notification(BaseModel):
    """Single queued notification."""

    id: str = Field(..., description="Opaque unique identifier")
    text: str = Field(..., description="Message shown to the user")
    at: int = Field(..., description="Creation time, ms since epoch")
