from dataclasses import dataclass
from pathlib import Path

from fastapi import Request
from sqlalchemy.orm import Session, sessionmaker

from core.config import Settings
from notifications.telegram import TelegramNotifier


@dataclass(frozen=True)
class AppContext:
    """Process-wide handles, built once at startup and only read afterwards."""

    settings: Settings
    session_factory: sessionmaker
    notifier: TelegramNotifier

    @property
    def upload_dir(self) -> Path:
        return Path(self.settings.UPLOAD_DIR)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_db(request: Request):
    db: Session = get_context(request).session_factory()
    try:
        yield db
    finally:
        db.close()
