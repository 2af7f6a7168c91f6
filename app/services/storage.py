import logging
import os
import random
import time

from flask import current_app
from werkzeug.utils import secure_filename

from app.exceptions import ValidationError

logger = logging.getLogger(__name__)

IMAGE_FIELDS = {"businessLogo"}
DOCUMENT_MIMETYPES = {"application/pdf", "image/jpeg", "image/jpg", "image/png"}


def _check_type(file, field_name: str) -> None:
    mimetype = (file.mimetype or "").lower()
    if field_name in IMAGE_FIELDS:
        if not mimetype.startswith("image/"):
            raise ValidationError("Only image files are allowed", field=field_name)
    elif mimetype not in DOCUMENT_MIMETYPES:
        raise ValidationError(
            "Invalid file type. Only PDF, JPEG, JPG, and PNG files are allowed",
            field=field_name,
        )


def store_upload(file, field_name: str) -> str:
    """Save an uploaded file and return the reference stored on the profile."""
    _check_type(file, field_name)
    filename = secure_filename(file.filename or "") or "upload"
    key = f"{field_name}-{int(time.time() * 1000)}-{random.randint(0, 10**9)}-{filename}"

    folder = current_app.config["UPLOAD_FOLDER"]
    os.makedirs(folder, exist_ok=True)
    file.save(os.path.join(folder, key))
    logger.info("stored upload %s for field %s", key, field_name)
    return f"{current_app.config['UPLOAD_URL_PREFIX'].rstrip('/')}/{key}"
