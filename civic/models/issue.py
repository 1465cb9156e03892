"""Issue record as stored in the civic_issues slot, plus draft and filters."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

IssueStatus = Literal["Pending", "In Progress", "Resolved"]

# Status rank for sorting: Pending < In Progress < Resolved
STATUS_ORDER: tuple[str, ...] = ("Pending", "In Progress", "Resolved")

ISSUE_CATEGORIES: tuple[str, ...] = ("Road", "Lighting", "Sanitation", "Water", "Parks", "Other")

ALL = "all"


class Issue(BaseModel):
    """Single citizen-submitted report."""

    id: str = Field(..., description="Opaque unique identifier, e.g. id-3f9c2a1b0d4elx2k1a9")
    title: str = Field(..., description="Short title; defaults to '<category> Issue'")
    name: str = Field(..., description="Reporter name")
    email: str = Field(..., description="Reporter email")
    location: str = Field(..., description="Free-text location")
    category: str = Field(..., description="One of ISSUE_CATEGORIES")
    description: str = Field(default="", description="Free-text description")
    image_data_url: str = Field(default="", description="data: URL of the attached image, empty when none")
    status: IssueStatus = Field(default="Pending", description="Pending, In Progress or Resolved")
    upvotes: int = Field(default=0, ge=0, description="Upvote count, only ever increases")
    created_at: int = Field(..., description="Creation time, ms since epoch")

    model_config = {"extra": "ignore"}

    def search_text(self) -> str:
        """Lowercased haystack for text filtering."""
        return f"{self.title} {self.description} {self.location} {self.category}".lower()


class IssueDraft(BaseModel):
    """User input for a new report. Strings are stripped on the way in."""

    name: str = ""
    email: str = ""
    location: str = ""
    category: str = ""
    description: str = ""
    title: str = ""
    image_data_url: str = ""

    @field_validator("name", "email", "location", "category", "description", "title", mode="before")
    @classmethod
    def _strip(cls, value: object) -> str:
        if value is None:
            return ""
        return str(value).strip()

    def resolved_title(self) -> str:
        """Title as entered, or '<category> Issue' when left empty."""
        return self.title or f"{self.category} Issue"


class IssueFilters(BaseModel):
    """Dashboard filters. 'all' disables the category/status filter."""

    text: str = ""
    category: str = ALL
    status: str = ALL


def status_rank(status: str) -> int:
    """Position of status in STATUS_ORDER (unknown statuses sort last)."""
    try:
        return STATUS_ORDER.index(status)
    except ValueError:
        return len(STATUS_ORDER)


def status_progress(status: str) -> int:
    """Progress bar percentage for a status."""
    return {"Pending": 10, "In Progress": 55, "Resolved": 100}.get(status, 0)
