"""
Business logic for comments.

Two independent kinds of comment live here:

* post comments (``comentarios``), attached to one post and listed per
  post;
* profile comments (``comentarios_sobre_mi``), attached to no post and
  no target member.  The table only records who wrote the comment, so
  ``list_profile_comments`` returns every profile comment in the
  system, whichever profile is being viewed.
"""

import logging
from typing import List, Optional

from ..core.db import Database
from ..core.errors import StoreError, require_fields
from ..schemas.comment import CommentEntry
from ..schemas.common import Created


logger = logging.getLogger(__name__)


def _to_entries(rows) -> List[CommentEntry]:
    return [
        CommentEntry(
            id=row["id"],
            text=row["comentario"],
            created_at=row["fecha"],
            author_name=row["nombre"],
        )
        for row in rows
    ]


class CommentService:
    """Create and list post comments and profile comments."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def create_comment(
        self,
        author_id: Optional[int],
        post_id: Optional[int],
        text: Optional[str],
    ) -> Created:
        """Attach a comment to a post.

        Unknown authors or posts violate a foreign key and surface as
        ``StoreError``.
        """
        require_fields(author_id=author_id, post_id=post_id, text=text)
        try:
            with self.db.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO comentarios (usuario_id, publicacion_id, comentario, fecha) "
                    "VALUES (?, ?, ?, datetime('now'))",
                    (author_id, post_id, text),
                )
                comment_id = cursor.lastrowid
        except StoreError as e:
            logger.error(
                "Failed to comment on post %s by member %s: %s", post_id, author_id, e.message
            )
            raise
        logger.info("Member %s commented on post %s (comment %s)", author_id, post_id, comment_id)
        return Created(id=comment_id)

    async def list_comments_for_post(self, post_id: int) -> List[CommentEntry]:
        """Return the comments of one post, newest first.

        A post with no comments, or no such post, gives an empty list.
        """
        with self.db.cursor() as cursor:
            rows = cursor.execute(
                """
                SELECT comentarios.id, comentario, fecha, miembros.nombre
                FROM comentarios
                JOIN miembros ON comentarios.usuario_id = miembros.id
                WHERE publicacion_id = ?
                ORDER BY comentarios.id DESC
                """,
                (post_id,),
            ).fetchall()
        return _to_entries(rows)

    async def create_profile_comment(self, author_id: Optional[int], text: Optional[str]) -> Created:
        require_fields(author_id=author_id, text=text)
        try:
            with self.db.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO comentarios_sobre_mi (usuario_id, comentario, fecha) "
                    "VALUES (?, ?, datetime('now'))",
                    (author_id, text),
                )
                comment_id = cursor.lastrowid
        except StoreError as e:
            logger.error("Failed to store profile comment by member %s: %s", author_id, e.message)
            raise
        logger.info("Member %s left profile comment %s", author_id, comment_id)
        return Created(id=comment_id)

    async def list_profile_comments(self) -> List[CommentEntry]:
        with self.db.cursor() as cursor:
            rows = cursor.execute(
                """
                SELECT comentarios_sobre_mi.id, comentario, fecha, miembros.nombre
                FROM comentarios_sobre_mi
                JOIN miembros ON comentarios_sobre_mi.usuario_id = miembros.id
                ORDER BY comentarios_sobre_mi.id DESC
                """
            ).fetchall()
        return _to_entries(rows)
