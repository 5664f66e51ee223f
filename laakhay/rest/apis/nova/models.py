"""Nova compute documents."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    href: str
    rel: str


class Flavor(BaseModel):
    """Hardware template of a server."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    ram: int | None = None
    disk: int | None = None
    vcpus: int | None = None
    links: list[Link] = Field(default_factory=list)
