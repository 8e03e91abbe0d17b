"""Photo uploads for places: multipart files and download-by-link."""

from __future__ import annotations

import logging
import os
import time
import uuid
from urllib.parse import urlparse

import requests
from django.conf import settings  # type: ignore
from django.core.files.base import ContentFile  # type: ignore
from django.core.files.storage import default_storage  # type: ignore

from shared.domain.errors import InvalidInput, UploadFailed

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def _extension(filename: str) -> str:
    _, ext = os.path.splitext(os.path.basename(filename or ""))
    return ext.lower() if ext else ""


def save_uploaded_photos(files) -> list[str]:
    """Store each uploaded file under a fresh name, keeping its extension."""
    if not files:
        raise InvalidInput("missing_files", "No files provided")
    if len(files) > settings.UPLOAD_MAX_FILES:
        raise InvalidInput("too_many_files", f"At most {settings.UPLOAD_MAX_FILES} files per upload")

    if any(upload.size is not None and upload.size > settings.UPLOAD_MAX_BYTES for upload in files):
        raise InvalidInput("file_too_large", "File too large")

    saved = []
    for upload in files:
        name = f"{uuid.uuid4().hex}{_extension(upload.name)}"
        saved.append(default_storage.save(name, upload))
    logger.info("Stored %d uploaded photos", len(saved))
    return saved


def download_photo(link) -> str:
    """Fetch an image by URL and store it as ``photo<ms>.jpg``."""
    if not isinstance(link, str) or not link.strip():
        raise InvalidInput("missing_link", "Image link is required")
    link = link.strip()
    if urlparse(link).scheme not in {"http", "https"}:
        raise InvalidInput("invalid_link", "Image link must be an http(s) URL")

    try:
        with requests.get(link, stream=True, timeout=settings.UPLOAD_LINK_TIMEOUT) as response:
            response.raise_for_status()
            content = bytearray()
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                content.extend(chunk)
                if len(content) > settings.UPLOAD_MAX_BYTES:
                    raise UploadFailed("download_failed", "Image is too large")
    except requests.RequestException as exc:
        logger.warning("Image download failed for %s: %s", link, exc)
        raise UploadFailed()

    name = f"photo{int(time.time() * 1000)}.jpg"
    stored = default_storage.save(name, ContentFile(bytes(content)))
    logger.info("Downloaded photo %s", stored)
    return stored
