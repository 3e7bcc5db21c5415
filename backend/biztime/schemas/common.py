"""Shared Schemas: field types and envelopes used by both resources."""

from typing import Annotated, Literal

from pydantic import BaseModel, StringConstraints

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class DeletedResponse(BaseModel):
    """Deletion confirmation."""
    status: Literal["Deleted"] = "Deleted"
