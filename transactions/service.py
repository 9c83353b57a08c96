import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from core.context import AppContext
from core.errors import fields_required, server_error
from core.exceptions import AppException
from core.models import Transaction
from notifications.telegram import notify_payment
from media.storage import StoredUpload

logger = logging.getLogger(__name__)

SUBMITTED_MESSAGE = "Transaction submitted and Telegram notified."


def save_transaction(db: Session, sender_name: str, transaction_id: str, image_url: str) -> Transaction:
    txn = Transaction(
        name=sender_name,
        transaction_id=transaction_id,
        image_url=image_url,
    )

    try:
        db.add(txn)
        db.commit()
        db.refresh(txn)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Server error while saving transaction %s", transaction_id)
        raise server_error()

    return txn


async def submit_transaction(
    db: Session,
    context: AppContext,
    sender_name: str | None,
    transaction_id: str | None,
    upload: StoredUpload | None,
) -> dict:
    if not sender_name or not transaction_id or upload is None:
        raise fields_required()

    try:
        txn = await run_in_threadpool(save_transaction, db, sender_name, transaction_id, upload.filename)
        logger.info("Saved transaction %s (row %s)", txn.transaction_id, txn.id)

        # The row is committed at this point; the alert outcome is only logged
        await notify_payment(
            context.notifier,
            context.upload_dir / upload.filename,
            sender_name,
            transaction_id,
        )
    except AppException:
        raise
    except Exception:
        logger.exception("Server error while submitting transaction %s", transaction_id)
        raise server_error()

    return {
        "success": True,
        "message": SUBMITTED_MESSAGE,
    }
