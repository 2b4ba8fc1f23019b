"""
Pydantic schemas for post comments and profile comments.

Both kinds of comment share the same read shape; only the create
payloads differ (profile comments are not tied to a post).
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .common import coerce_text


class CommentCreate(BaseModel):
    """Body of ``POST /api/comentar``."""

    usuario_id: Optional[int] = Field(None, description="Author's member id")
    publicacion_id: Optional[int] = Field(None, description="Post being commented on")
    comentario: Optional[str] = Field(None, description="Text of the comment")

    @field_validator("comentario", mode="before")
    @classmethod
    def accept_numeric_comentario(cls, v: Any) -> Any:
        return coerce_text(v)


class ProfileCommentCreate(BaseModel):
    """Body of ``POST /api/comentario-sobre-mi``."""

    usuario_id: Optional[int] = Field(None, description="Author's member id")
    comentario: Optional[str] = Field(None, description="Text of the comment")

    @field_validator("comentario", mode="before")
    @classmethod
    def accept_numeric_comentario(cls, v: Any) -> Any:
        return coerce_text(v)


class CommentEntry(BaseModel):
    id: int
    text: Optional[str]
    created_at: Optional[str]
    author_name: Optional[str]


class CommentRead(BaseModel):
    id: int
    comentario: Optional[str]
    fecha: Optional[str]
    nombre: Optional[str]

    @classmethod
    def from_entry(cls, entry: CommentEntry) -> "CommentRead":
        return cls(
            id=entry.id,
            comentario=entry.text,
            fecha=entry.created_at,
            nombre=entry.author_name,
        )
