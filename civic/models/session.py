"""Admin session flag stored in the civic_session slot."""

from pydantic import BaseModel, Field


class Session(BaseModel):
    """Single authenticated flag; not a credential."""

    authed: bool = Field(default=False, description="True after a successful admin login")
