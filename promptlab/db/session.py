from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from promptlab.core.config import DATABASE_URL, DATABASE_ECHO


def build_engine(database_url: str, echo: bool = False):
    """Create the async engine; in-memory SQLite shares one connection."""
    engine_kwargs = {"echo": echo}
    if database_url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url:
            engine_kwargs["poolclass"] = StaticPool
    return create_async_engine(database_url, **engine_kwargs)


engine = build_engine(DATABASE_URL, echo=DATABASE_ECHO)

# Rows stay readable after commit; request handlers serialize them afterwards
SessionLocal = async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
