# portfolio/application/media.py
import secrets
import time
from typing import Any

from portfolio.domain.invariants.exceptions import InvariantViolation
from portfolio.domain.invariants.fields import assert_choice
from portfolio.gateway import Gateway
from portfolio.utils.media import IMAGE_EXTENSIONS, VIDEO_EXTENSIONS

UPLOAD_FOLDERS = {
    "blog": IMAGE_EXTENSIONS,
    "projects": IMAGE_EXTENSIONS,
    "services/images": IMAGE_EXTENSIONS,
    "services/videos": VIDEO_EXTENSIONS,
}


def upload_media(*, gateway: Gateway, file: Any, folder: str) -> str:
    """
    Store an uploaded file under ``folder`` and return its public URL.

    File names are replaced by ``<timestamp>-<random>.<ext>``.
    """
    assert_choice(folder, set(UPLOAD_FOLDERS), "folder")

    if file is None or not getattr(file, "filename", None):
        raise InvariantViolation("No file provided.")

    extension = file.filename.rsplit(".", 1)[-1].lower() if "." in file.filename else ""
    if extension not in UPLOAD_FOLDERS[folder]:
        raise InvariantViolation(f"File type '.{extension}' is not allowed in {folder}.")

    name = f"{int(time.time() * 1000)}-{secrets.token_hex(4)}.{extension}"
    return gateway.upload(file, f"{folder}/{name}")
