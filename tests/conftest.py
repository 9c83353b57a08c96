import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import Settings
from core.models import Transaction
from main import create_app
from notifications.telegram import TelegramNotifier


class TelegramStub:
    """Records Bot API calls and answers with a configurable reply."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.payload = {"ok": True, "result": {"message_id": 1}}
        self.error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        TELEGRAM_BOT_TOKEN="test-token",
        TELEGRAM_CHAT_ID="-1001",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        LOG_DIR="",
    )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def telegram():
    return TelegramStub()


@pytest.fixture
def notifier(settings, telegram):
    return TelegramNotifier(
        token=settings.TELEGRAM_BOT_TOKEN,
        chat_id=settings.TELEGRAM_CHAT_ID,
        transport=httpx.MockTransport(telegram),
    )


@pytest.fixture
def client(settings, engine, notifier):
    app = create_app(settings=settings, engine=engine, notifier=notifier)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def stored_transactions(engine):
    def _fetch():
        Session = sessionmaker(bind=engine)
        with Session() as db:
            return db.query(Transaction).order_by(Transaction.id).all()
    return _fetch
