"""
Feed endpoints: publish a post and list all posts.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from social_feed_api.app.api.deps import get_feed_service
from social_feed_api.app.core.errors import FeedError, StoreError
from social_feed_api.app.schemas.common import CreateResponse
from social_feed_api.app.schemas.post import PostCreate, PostRead
from social_feed_api.app.services.feed_service import FeedService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/publicar", response_model=CreateResponse, response_model_exclude_none=True)
async def create_post(
    data: PostCreate,
    service: FeedService = Depends(get_feed_service),
) -> CreateResponse:
    try:
        created = await service.create_post(data.usuario_id, data.contenido)
    except FeedError:
        return CreateResponse(success=False)
    return CreateResponse(success=True, id=created.id)


@router.get("/publicaciones", response_model=List[PostRead])
async def list_posts(service: FeedService = Depends(get_feed_service)) -> List[PostRead]:
    """Return every post, newest first, with its author's name.

    A store failure is answered with an empty list.
    """
    try:
        entries = await service.list_posts()
    except StoreError as e:
        logger.error("Listing posts failed, returning empty feed: %s", e.message)
        return []
    return [PostRead.from_entry(entry) for entry in entries]
