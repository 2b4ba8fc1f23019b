"""
Pydantic schemas for feed posts.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .common import coerce_text


class PostCreate(BaseModel):
    """Body of ``POST /api/publicar``."""

    usuario_id: Optional[int] = Field(None, description="Author's member id")
    contenido: Optional[str] = Field(None, description="Text of the post")

    @field_validator("contenido", mode="before")
    @classmethod
    def accept_numeric_contenido(cls, v: Any) -> Any:
        return coerce_text(v)


class PostEntry(BaseModel):
    """A post joined with its author's name, as returned by the service."""

    id: int
    content: Optional[str]
    created_at: Optional[str]
    author_name: Optional[str]


class PostRead(BaseModel):
    """A post as rendered in the feed."""

    id: int
    contenido: Optional[str]
    fecha: Optional[str]
    nombre: Optional[str]

    @classmethod
    def from_entry(cls, entry: PostEntry) -> "PostRead":
        return cls(
            id=entry.id,
            contenido=entry.content,
            fecha=entry.created_at,
            nombre=entry.author_name,
        )
