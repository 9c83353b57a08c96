import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.engine import Engine

from core.config import Settings, get_settings
from core.context import AppContext
from core.database import build_engine, build_session_factory
from core.exceptions import AppException
from core.handlers import app_exception_handler
from core.init_db import init_db
from core.logger import setup_logging
from horoscope.main import router as horoscope_router
from notifications.telegram import TelegramNotifier
from transactions.main import router as transaction_router

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "🪐 Welcome to AstroWatch API! Server is alive!"


def build_api_router() -> APIRouter:
    router = APIRouter()
    router.include_router(horoscope_router)
    router.include_router(transaction_router)
    return router


def build_notifier(settings: Settings) -> TelegramNotifier:
    return TelegramNotifier(
        token=settings.TELEGRAM_BOT_TOKEN,
        chat_id=settings.TELEGRAM_CHAT_ID,
        base_url=str(settings.TELEGRAM_API_BASE_URL),
        timeout=settings.TELEGRAM_TIMEOUT_SECONDS,
    )


def create_app(
    settings: Settings | None = None,
    engine: Engine | None = None,
    notifier: TelegramNotifier | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_engine = engine or build_engine(settings.DATABASE_URL)
        # Traffic is only accepted once the store answers
        init_db(db_engine)

        app.state.context = AppContext(
            settings=settings,
            session_factory=build_session_factory(db_engine),
            notifier=notifier or build_notifier(settings),
        )
        yield

        if engine is None:
            db_engine.dispose()

    app = FastAPI(title="AstroWatch API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(AppException, app_exception_handler)

    api_router = build_api_router()
    app.include_router(api_router, prefix="/api")
    # Older clients post to the unprefixed paths
    app.include_router(api_router, include_in_schema=False)

    @app.get("/", response_class=PlainTextResponse)
    def health_check():
        return WELCOME_MESSAGE

    return app


def run():
    settings = get_settings()
    setup_logging(settings)
    logger.info("Server starting on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run("main:create_app", factory=True, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
