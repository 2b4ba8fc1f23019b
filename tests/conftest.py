"""
Shared fixtures: every test works against its own SQLite file under
``tmp_path``, so tests never see each other's rows.
"""

import pytest
from fastapi.testclient import TestClient

from social_feed_api.app.core.config import Settings
from social_feed_api.app.core.db import Database
from social_feed_api.app.main import create_app
from social_feed_api.app.services.account_service import AccountService
from social_feed_api.app.services.comment_service import CommentService
from social_feed_api.app.services.feed_service import FeedService


@pytest.fixture
def db(tmp_path) -> Database:
    database = Database(str(tmp_path / "feed.sqlite"))
    database.init_schema()
    return database


@pytest.fixture
def accounts(db) -> AccountService:
    return AccountService(db)


@pytest.fixture
def feed(db) -> FeedService:
    return FeedService(db)


@pytest.fixture
def comments(db) -> CommentService:
    return CommentService(db)


@pytest.fixture
def app(tmp_path):
    return create_app(Settings(database_url=str(tmp_path / "api.sqlite")))


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan hook, which creates the schema.
    with TestClient(app) as test_client:
        yield test_client
