"""
Business logic for member accounts.

Registration stores a bcrypt hash of the password; login looks the
member up by email and checks the password against that hash.  Email
uniqueness is left to the ``UNIQUE`` constraint on ``miembros.email``,
so two concurrent registrations with the same address cannot both
succeed.
"""

import logging
from typing import Optional

from ..core.db import Database
from ..core.errors import (
    AuthError,
    DuplicateEmailError,
    NotFoundError,
    StoreError,
    require_fields,
)
from ..core.security import hash_password, verify_password
from ..schemas.common import Created
from ..schemas.member import MemberSummary


logger = logging.getLogger(__name__)


class AccountService:
    """Registration, login and lookup of members."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def register(self, name: Optional[str], email: Optional[str], password: Optional[str]) -> Created:
        """Create a new member and return its id.

        Raises
        ------
        ValidationError
            If any of ``name``, ``email`` or ``password`` is empty.
        DuplicateEmailError
            If ``email`` already belongs to a member.
        StoreError
            On any other database failure.
        """
        require_fields(name=name, email=email, password=password)
        hashed = hash_password(password)
        try:
            with self.db.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO miembros (nombre, email, password) VALUES (?, ?, ?)",
                    (name, email, hashed),
                )
                member_id = cursor.lastrowid
        except StoreError as e:
            if e.is_unique_violation:
                logger.info("Registration rejected, email already in use: %s", email)
                raise DuplicateEmailError(email) from e
            logger.error("Failed to register member %s: %s", email, e.message)
            raise
        logger.info("Registered member %s (%s)", member_id, email)
        return Created(id=member_id)

    async def login(self, email: Optional[str], password: Optional[str]) -> MemberSummary:
        """Authenticate a member by email and password.

        Returns the member's id and name; the stored hash never leaves
        this method.
        """
        require_fields(email=email, password=password)
        with self.db.cursor() as cursor:
            row = cursor.execute(
                "SELECT id, nombre, email, password FROM miembros WHERE email = ?",
                (email,),
            ).fetchone()
        if not row:
            raise NotFoundError(email)
        if not verify_password(password, row["password"]):
            logger.info("Failed login for member %s", row["id"])
            raise AuthError(email)
        return MemberSummary(id=row["id"], name=row["nombre"])

    async def find_by_name(self, name: str) -> Optional[MemberSummary]:
        """Look a member up by exact, case‑sensitive name."""
        with self.db.cursor() as cursor:
            row = cursor.execute(
                "SELECT id, nombre FROM miembros WHERE nombre = ?",
                (name,),
            ).fetchone()
        if not row:
            return None
        return MemberSummary(id=row["id"], name=row["nombre"])
