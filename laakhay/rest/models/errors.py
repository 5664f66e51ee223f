"""Error document returned by services on client errors."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorEntry(BaseModel):
    """Single error reported by the service."""

    code: str = Field(..., min_length=1)
    message: str = ""

    model_config = ConfigDict(frozen=True)


class ErrorsDocument(BaseModel):
    """Collection of errors as sent in a 4xx response body."""

    errors: list[ErrorEntry] = Field(default_factory=list, alias="collection")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
