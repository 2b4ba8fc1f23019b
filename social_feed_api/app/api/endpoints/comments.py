"""
Comment endpoints.

``/comentar`` and ``/comentarios/{id}`` deal with comments on a post;
``/comentario-sobre-mi`` and ``/comentarios-sobre-mi`` with profile
comments, which are listed system‑wide.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from social_feed_api.app.api.deps import get_comment_service
from social_feed_api.app.core.errors import FeedError, StoreError
from social_feed_api.app.schemas.comment import (
    CommentCreate,
    CommentRead,
    ProfileCommentCreate,
)
from social_feed_api.app.schemas.common import CreateResponse
from social_feed_api.app.services.comment_service import CommentService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/comentar", response_model=CreateResponse, response_model_exclude_none=True)
async def create_comment(
    data: CommentCreate,
    service: CommentService = Depends(get_comment_service),
) -> CreateResponse:
    try:
        created = await service.create_comment(data.usuario_id, data.publicacion_id, data.comentario)
    except FeedError:
        return CreateResponse(success=False)
    return CreateResponse(success=True, id=created.id)


@router.get("/comentarios/{post_id}", response_model=List[CommentRead])
async def list_comments(
    post_id: int,
    service: CommentService = Depends(get_comment_service),
) -> List[CommentRead]:
    try:
        entries = await service.list_comments_for_post(post_id)
    except StoreError as e:
        logger.error("Listing comments of post %s failed: %s", post_id, e.message)
        return []
    return [CommentRead.from_entry(entry) for entry in entries]


@router.post(
    "/comentario-sobre-mi",
    response_model=CreateResponse,
    response_model_exclude_none=True,
)
async def create_profile_comment(
    data: ProfileCommentCreate,
    service: CommentService = Depends(get_comment_service),
) -> CreateResponse:
    try:
        created = await service.create_profile_comment(data.usuario_id, data.comentario)
    except FeedError:
        return CreateResponse(success=False)
    return CreateResponse(success=True, id=created.id)


@router.get("/comentarios-sobre-mi", response_model=List[CommentRead])
async def list_profile_comments(
    service: CommentService = Depends(get_comment_service),
) -> List[CommentRead]:
    """Return every profile comment in the system, newest first."""
    try:
        entries = await service.list_profile_comments()
    except StoreError as e:
        logger.error("Listing profile comments failed: %s", e.message)
        return []
    return [CommentRead.from_entry(entry) for entry in entries]
