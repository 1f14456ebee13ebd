from sqlalchemy.ext.asyncio import AsyncEngine

from promptlab.db.base import Base

# Register every table on Base.metadata
from promptlab.models.test import Test  # noqa: F401
from promptlab.models.model_test import ModelTest  # noqa: F401
from promptlab.models.message import Message  # noqa: F401
from promptlab.models.response import Response  # noqa: F401
from promptlab.models.api_key import ApiKey  # noqa: F401


async def init_db(engine: AsyncEngine):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
