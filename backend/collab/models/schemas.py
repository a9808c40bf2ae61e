# backend/collab/models/schemas.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Health(BaseModel):
    status: str = "healthy"
    questions: int = 0


class Version(BaseModel):
    version: str


class Question(BaseModel):
    """One question record; identity is `id`."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="opaque, non-empty question id")
    title: str
    content: str
    tags: Optional[List[str]] = None

    @field_validator("id")
    @classmethod
    def _id_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("No id provided")
        return v
