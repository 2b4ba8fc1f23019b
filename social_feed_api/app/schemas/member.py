"""
Pydantic models for member registration, login and lookup.

Every request field is optional at the schema level: a missing field
must reach the service and come back as the ``Faltan datos`` envelope,
not as a 422 error.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MemberRegister(BaseModel):
    """Body of ``POST /api/registro``."""

    nombre: Optional[str] = Field(None, examples=["Ana"])
    email: Optional[str] = Field(None, examples=["ana@example.com"])
    password: Optional[str] = Field(None, examples=["secreto"])


class MemberLogin(BaseModel):
    """Body of ``POST /api/login``."""

    email: Optional[str] = Field(None, examples=["ana@example.com"])
    password: Optional[str] = Field(None, examples=["secreto"])


class MemberSummary(BaseModel):
    """A member as seen by other members: never carries the password hash."""

    id: int
    name: Optional[str]


class LoginResponse(BaseModel):
    success: bool
    id: Optional[int] = None
    nombre: Optional[str] = None
    message: Optional[str] = None


class MemberLookupResponse(BaseModel):
    exists: bool
    id: Optional[int] = None
    nombre: Optional[str] = None
