from dataclasses import dataclass
from typing import Optional
import httpx
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker
from sevenpro.config import Settings
from sevenpro.core.database import build_engine, build_session_factory
from sevenpro.services.notifier import Notifier

@dataclass
class AppContext:
    """Process-wide resources, built once at startup and read-only afterwards."""
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker
    notifier: Notifier

    async def aclose(self) -> None:
        await self.notifier.aclose()
        await self.engine.dispose()

def build_context(settings: Settings, http_client: Optional[httpx.AsyncClient] = None) -> AppContext:
    engine = build_engine(settings.database_url)
    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=build_session_factory(engine),
        notifier=Notifier(settings, client=http_client),
    )

def get_context(request: Request) -> AppContext:
    return request.app.state.context
