from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator


class Document(BaseModel):
    """
    One text snippet in the store, with its precomputed embedding.
    Field names match the on-disk record layout.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique document ID")
    repo: str = Field(..., description="Repository the snippet comes from")
    file: str = Field(..., description="File path inside the repository")
    text: str = Field(..., description="Raw snippet text")
    emb: Tuple[FiniteFloat, ...] = Field(default_factory=tuple, description="Embedding vector, finite components only")

    @field_validator("id")
    @classmethod
    def id_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("id must not be blank")
        return v


@dataclass(frozen=True)
class ScoredResult:
    document: Document
    score: float
