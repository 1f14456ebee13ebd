from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from promptlab.db.session import SessionLocal


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as db:
        yield db
