"""
Top‑level API router.

Aggregates the domain routers.  The paths are the ones the existing
client calls (``/api/registro``, ``/api/publicaciones``...), so none
of the sub‑routers adds a prefix of its own.
"""

from fastapi import APIRouter

from .endpoints import comments, members, posts

router = APIRouter()

router.include_router(members.router, tags=["members"])
router.include_router(posts.router, tags=["posts"])
router.include_router(comments.router, tags=["comments"])
