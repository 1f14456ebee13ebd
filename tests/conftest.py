"""Shared fixtures: in-memory database, fake vendor SDK clients, auth."""

import os

# Configuration is read at import time, so set it before promptlab loads
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["USER_API_KEY_ENCRYPTION_SECRET"] = "a1" * 32
os.environ["LOG_LEVEL"] = "DEBUG"

import httpx
import pytest
import pytest_asyncio
from jose import jwt
from sqlalchemy.ext.asyncio import async_sessionmaker

from promptlab.core.config import ALGORITHM, SECRET_KEY
from promptlab.core.dependencies import get_provider_handlers
from promptlab.db.deps import get_db
from promptlab.db.init_db import init_db
from promptlab.db.session import build_engine
from promptlab.main import app
from promptlab.services.credentials import CredentialStore
from promptlab.services.model_registry import ProviderName
from promptlab.services.providers import AnthropicHandler, GoogleHandler, OpenAIHandler
from fakes import STORED_KEYS, USER_ID, make_vendors


# =============================================================================
# Vendor fakes
# =============================================================================


@pytest.fixture
def vendors():
    return make_vendors()


@pytest.fixture
def handlers(vendors):
    return {
        ProviderName.OPENAI: OpenAIHandler(client_factory=vendors[ProviderName.OPENAI]),
        ProviderName.ANTHROPIC: AnthropicHandler(client_factory=vendors[ProviderName.ANTHROPIC]),
        ProviderName.GOOGLE: GoogleHandler(client_factory=vendors[ProviderName.GOOGLE]),
    }


# =============================================================================
# Database
# =============================================================================


@pytest_asyncio.fixture
async def engine():
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def stored_keys(session_factory):
    """Store one key per provider for USER_ID."""
    async with session_factory() as session:
        store = CredentialStore(session)
        for provider, key in STORED_KEYS.items():
            await store.save_key(USER_ID, provider, key)
    return STORED_KEYS


# =============================================================================
# HTTP
# =============================================================================


def make_token(user_id):
    return jwt.encode({"sub": user_id}, SECRET_KEY, algorithm=ALGORITHM)


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {make_token(USER_ID)}"}


@pytest_asyncio.fixture
async def client(session_factory, handlers):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_provider_handlers] = lambda: handlers

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client

    app.dependency_overrides.clear()
