from fastapi import APIRouter, Depends, Form
from sqlalchemy.orm import Session

from core.context import AppContext, get_context, get_db
from transactions.schemas import SubmissionResponse
from transactions.service import submit_transaction
from media.storage import StoredUpload, store_screenshot

router = APIRouter(tags=["Transactions"])


@router.post(
    "/submit-transaction",
    response_model=SubmissionResponse,
    responses={400: {"model": SubmissionResponse}, 500: {"model": SubmissionResponse}},
)
async def submit(
    senderName: str | None = Form(None),
    transactionId: str | None = Form(None),
    upload: StoredUpload | None = Depends(store_screenshot),
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
):
    return await submit_transaction(db, context, senderName, transactionId, upload)
