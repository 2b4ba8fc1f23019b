"""
FastAPI dependencies that hand each endpoint its service.

The ``Database`` handle is built once in ``create_app`` and stored on
``app.state``; services are cheap wrappers around it and are created
per request.
"""

from fastapi import Depends, Request

from ..core.db import Database
from ..services.account_service import AccountService
from ..services.comment_service import CommentService
from ..services.feed_service import FeedService


def get_database(request: Request) -> Database:
    return request.app.state.db


def get_account_service(db: Database = Depends(get_database)) -> AccountService:
    return AccountService(db)


def get_feed_service(db: Database = Depends(get_database)) -> FeedService:
    return FeedService(db)


def get_comment_service(db: Database = Depends(get_database)) -> CommentService:
    return CommentService(db)
