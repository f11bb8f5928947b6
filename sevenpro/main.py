"""7 Pro backend: orders, contact messages and order confirmation email.

Usage:
    uvicorn sevenpro.main:app --port 4000
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional
import httpx
from fastapi import FastAPI
from sevenpro.api.router import api_router
from sevenpro.config import Settings, get_settings
from sevenpro.core.context import build_context
from sevenpro.core.database import init_db
from sevenpro.core.errors import UnhandledErrorMiddleware, register_exception_handlers
from sevenpro.core.origins import OriginGuardMiddleware

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, http_client: Optional[httpx.AsyncClient] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        context = build_context(settings, http_client=http_client)
        app.state.context = context
        await init_db(context.engine)
        if context.notifier.enabled:
            logger.info("Email transport configured. Order emails will be sent.")
        else:
            logger.warning("EMAIL_USER or EMAIL_PASS not set - order confirmation emails are disabled.")
        logger.info(f"7 Pro backend ready on port {settings.port}")
        yield
        await context.aclose()

    app = FastAPI(title="7 Pro Backend", lifespan=lifespan)
    # last added runs first: the origin guard wraps the error envelope
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(OriginGuardMiddleware)
    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        return {"ok": True, "message": "7 Pro backend running."}

    return app


app = create_app()
