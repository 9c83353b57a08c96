import logging
from dataclasses import dataclass
from pathlib import Path

import httpx
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)

MARKDOWN_SPECIAL = ("_", "*", "`", "[")


class NotificationError(Exception):
    pass


@dataclass(frozen=True)
class NotificationResult:
    delivered: bool
    error: str | None = None


def escape_markdown(value: str) -> str:
    for char in MARKDOWN_SPECIAL:
        value = value.replace(char, f"\\{char}")
    return value


def build_payment_caption(sender_name: str, transaction_id: str) -> str:
    return (
        "💸 *New Payment Received!*\n\n"
        f"👤 *Name:* {escape_markdown(sender_name)}\n"
        f"🆔 *Transaction ID:* {escape_markdown(transaction_id)}"
    )


class TelegramNotifier:
    """Thin client for the Bot API ``sendPhoto`` method."""

    def __init__(
        self,
        token: str | None,
        chat_id: str | None,
        base_url: str = "https://api.telegram.org",
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.token = token
        self.chat_id = chat_id
        self.base_url = str(base_url).rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.token and self.chat_id)

    def _method_url(self, method: str) -> str:
        return f"{self.base_url}/bot{self.token}/{method}"

    async def send_photo(self, photo: bytes, filename: str, caption: str) -> dict:
        if not self.configured:
            raise NotificationError("Telegram bot token or chat id is not set")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(
                self._method_url("sendPhoto"),
                data={
                    "chat_id": self.chat_id,
                    "caption": caption,
                    "parse_mode": "Markdown",
                },
                files={"photo": (filename, photo)},
            )

        if response.status_code < 200 or response.status_code >= 300:
            detail = (response.text or "")[:200]
            raise NotificationError(f"Telegram error {response.status_code}: {detail}")

        body = response.json()
        if not isinstance(body, dict):
            raise NotificationError(f"Telegram returned an unexpected reply: {str(body)[:200]}")
        if not body.get("ok"):
            raise NotificationError(f"Telegram rejected message: {body.get('description')}")
        return body


async def notify_payment(
    notifier: TelegramNotifier,
    image_path: Path,
    sender_name: str,
    transaction_id: str,
) -> NotificationResult:
    """Send the payment alert, never raising.

    Any failure is logged as a warning and reported through the returned
    result; callers decide nothing based on it beyond logging.
    """
    try:
        photo = await run_in_threadpool(image_path.read_bytes)
        await notifier.send_photo(
            photo,
            image_path.name,
            build_payment_caption(sender_name, transaction_id),
        )
    except Exception as e:
        logger.warning("Telegram error (not fatal): %s", e)
        return NotificationResult(delivered=False, error=str(e))

    logger.info("Telegram notified for transaction %s", transaction_id)
    return NotificationResult(delivered=True)
