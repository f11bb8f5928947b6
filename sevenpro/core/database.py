import logging
from typing import AsyncGenerator
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

# registers the tables on SQLModel.metadata
from sevenpro.models.order import Order  # noqa: F401
from sevenpro.models.message import ContactMessage  # noqa: F401

logger = logging.getLogger(__name__)

def build_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, pool_pre_ping=True)

def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

async def init_db(engine: AsyncEngine) -> bool:
    """Create missing tables. A failure is logged and the process keeps running."""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info(f"Connected to database: {engine.url.render_as_string(hide_password=True)}")
        return True
    except Exception as e:
        logger.error(f"Database connection error: {e}")
        return False

async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    session_factory = request.app.state.context.session_factory
    async with session_factory() as session:
        yield session
