"""
Business logic for the post feed.
"""

import logging
from typing import List, Optional

from ..core.db import Database
from ..core.errors import StoreError, require_fields
from ..schemas.common import Created
from ..schemas.post import PostEntry


logger = logging.getLogger(__name__)


class FeedService:
    """Create posts and list the whole feed, newest first."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def create_post(self, author_id: Optional[int], content: Optional[str]) -> Created:
        """Insert a post stamped with the store's current time.

        An ``author_id`` that matches no member violates the foreign
        key and is reported as ``StoreError``.
        """
        require_fields(author_id=author_id, content=content)
        try:
            with self.db.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO publicaciones (usuario_id, contenido, fecha) "
                    "VALUES (?, ?, datetime('now'))",
                    (author_id, content),
                )
                post_id = cursor.lastrowid
        except StoreError as e:
            logger.error("Failed to create post for member %s: %s", author_id, e.message)
            raise
        logger.info("Member %s published post %s", author_id, post_id)
        return Created(id=post_id)

    async def list_posts(self) -> List[PostEntry]:
        with self.db.cursor() as cursor:
            rows = cursor.execute(
                """
                SELECT publicaciones.id, contenido, fecha, miembros.nombre
                FROM publicaciones
                JOIN miembros ON publicaciones.usuario_id = miembros.id
                ORDER BY publicaciones.id DESC
                """
            ).fetchall()
        return [
            PostEntry(
                id=row["id"],
                content=row["contenido"],
                created_at=row["fecha"],
                author_name=row["nombre"],
            )
            for row in rows
        ]
