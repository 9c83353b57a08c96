import shutil
import time
from dataclasses import dataclass
from pathlib import Path

from fastapi import Depends, File, UploadFile

from core.context import AppContext, get_context

FILENAME_PREFIX = "txn-"


@dataclass(frozen=True)
class StoredUpload:
    filename: str
    path: Path
    original_filename: str
    content_type: str | None = None


def build_filename(original_filename: str, now_ms: int | None = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{FILENAME_PREFIX}{now_ms}{Path(original_filename).suffix}"


def save_upload(upload: UploadFile, upload_dir: Path) -> StoredUpload:
    """Write an uploaded file to ``upload_dir`` under a generated ``txn-<millis><ext>`` name.

    The directory is created on first use. Two uploads landing in the same
    millisecond get the same name; the later one overwrites the earlier.
    """
    upload_dir.mkdir(parents=True, exist_ok=True)

    filename = build_filename(upload.filename)
    path = upload_dir / filename

    upload.file.seek(0)
    with path.open("wb") as out:
        shutil.copyfileobj(upload.file, out)

    return StoredUpload(
        filename=filename,
        path=path,
        original_filename=upload.filename,
        content_type=upload.content_type,
    )


def store_screenshot(
    screenshot: UploadFile | None = File(None),
    context: AppContext = Depends(get_context),
) -> StoredUpload | None:
    # browsers send an unnamed empty part for an untouched file input
    if screenshot is None or not screenshot.filename:
        return None
    return save_upload(screenshot, context.upload_dir)
