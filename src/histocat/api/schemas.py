"""Response models for the histocat HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from histocat.core.rendering import RenderingMode


class EventsResponse(BaseModel):
    """Rendered event blocks for one language tag."""

    language: str
    mode: RenderingMode
    count: int = Field(ge=0)
    events: list[str] = Field(default_factory=list)


class LanguageInfo(BaseModel):
    """A supported language tag and the dataset that serves it."""

    tag: str
    dataset: str
    count: int = Field(ge=0)


class HealthStatus(BaseModel):
    status: str = "ok"
    environment: str
    version: str


__all__ = ["EventsResponse", "HealthStatus", "LanguageInfo"]
