# model/site.py
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SiteRecord(BaseModel):
    """
    Configuration persisted for a claimed site name.
    Written once at claim time, never mutated.
    """

    model_config = ConfigDict(frozen=True)

    siteName: str
    description: str | None = None
    style: str | None = None
    initialContent: list[str] | None = None
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("description", "style", "initialContent", mode="before")
    @classmethod
    def _empty_as_missing(cls, v):
        # Empty values are omitted from config.json like absent ones
        return v or None


class Section(BaseModel):
    id: str
    name: str
    description: str
    mandatory: bool


class Theme(BaseModel):
    id: str
    name: str
    image: str | None = None
