"""Pydantic schema for branch description generation requests."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class EntityType(str, Enum):
    """Kind of GitHub entity a title and body were taken from."""

    ISSUE = "issue"
    PR = "pr"

    @property
    def display_name(self) -> str:
        """Wording used for this entity type in prompts."""
        return "pull request" if self is EntityType.PR else "issue"


class GenerationRequest(BaseModel):
    """Pydantic model for the input of a single description generation."""

    model_config = ConfigDict(frozen=True)

    title: str
    body: str = ""
    entity_type: EntityType = EntityType.ISSUE

    @field_validator("body", mode="before")
    @classmethod
    def coerce_missing_body(cls, value: str | None) -> str:
        """Treat a missing body the same as an empty one."""
        return value or ""
