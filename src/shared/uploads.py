"""Disk storage for user-uploaded photos."""

import os
import shutil
import uuid
from pathlib import Path

import structlog
from fastapi import UploadFile

logger = structlog.get_logger(__name__)

ACCEPTED_CONTENT_TYPES = ("image/png", "image/jpg", "image/jpeg")
PUBLIC_PREFIX = "/uploads/"


def uploads_dir() -> Path:
    path = Path(os.getenv("UPLOADS_DIR", "uploads"))
    path.mkdir(parents=True, exist_ok=True)
    return path


def store_photo(upload: UploadFile | None) -> str | None:
    """Persist an uploaded image and return its public URL.

    Files with an unsupported content type are skipped and ``None`` is returned,
    leaving the caller to proceed without a photo.
    """
    if upload is None or not upload.filename:
        return None

    if upload.content_type not in ACCEPTED_CONTENT_TYPES:
        logger.info("photo_rejected", filename=upload.filename, content_type=upload.content_type)
        return None

    extension = upload.filename.rsplit(".", 1)[-1] if "." in upload.filename else "img"
    file_name = f"{uuid.uuid4()}.{extension}"

    with (uploads_dir() / file_name).open("wb") as target:
        shutil.copyfileobj(upload.file, target)

    logger.info("photo_stored", file_name=file_name)
    return PUBLIC_PREFIX + file_name


def discard_photo(url: str | None) -> None:
    """Remove a photo stored by ``store_photo``; unknown or missing files are ignored."""
    if not url or not url.startswith(PUBLIC_PREFIX):
        return

    path = uploads_dir() / url[len(PUBLIC_PREFIX) :]
    path.unlink(missing_ok=True)
    logger.info("photo_discarded", file_name=path.name)
