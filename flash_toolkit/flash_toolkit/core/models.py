"""Domain models for sidebars and template context."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Sidebar(BaseModel):
    """A registered widget area."""

    id: str = Field(..., min_length=1, description="Sidebar identifier")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="Admin description")


class TemplateArgs(BaseModel):
    """Named values handed to a template part.

    Arbitrary fields are accepted; each one becomes a variable in the
    template's rendering context.
    """

    model_config = ConfigDict(extra="allow")

    def as_context(self) -> dict:
        return self.model_dump()
