import os

# Settings are read at import time
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from mongomock_motor import AsyncMongoMockClient

from app.core.config import settings
from app.api.v1.api import api_router
from app.core.exception_handlers import register_exception_handlers
from app.core.rate_limit import limiter
from app.db.init_db import init_db

# Disable rate limiting globally for tests
limiter.enabled = False

@pytest.fixture
async def database():
    # A fresh in-memory MongoDB per test keeps tests independent
    mongo_client = AsyncMongoMockClient()
    db = mongo_client["greenstagram_test"]
    await init_db(db)
    yield db

@pytest.fixture
async def client(database):
    # Create a fresh app for each test to avoid middleware/loop issues
    new_app = FastAPI()
    register_exception_handlers(new_app)
    new_app.include_router(api_router, prefix=settings.API_PREFIX)

    async with AsyncClient(transport=ASGITransport(app=new_app), base_url="http://test") as c:
        yield c
