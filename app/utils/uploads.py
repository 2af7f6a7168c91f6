from flask import request

from app.exceptions import ValidationError
from app.services.storage import store_upload

MAX_FILES_PER_FIELD = 5


def request_payload() -> dict:
    """Body of a JSON or multipart request as a plain dict."""
    if request.form or (request.mimetype or "").startswith("multipart/"):
        data = {}
        for key in request.form.keys():
            values = request.form.getlist(key)
            data[key] = values if len(values) > 1 else values[0]
        return data
    body = request.get_json(silent=True)
    return dict(body) if isinstance(body, dict) else {}


def attach_uploads(payload: dict, single=(), multiple=()) -> dict:
    """Store uploaded files and put their references into ``payload``."""
    for field in single:
        file = request.files.get(field)
        if file and file.filename:
            payload[field] = store_upload(file, field)
    for field in multiple:
        files = [f for f in request.files.getlist(field) if f and f.filename]
        if len(files) > MAX_FILES_PER_FIELD:
            raise ValidationError(
                f"At most {MAX_FILES_PER_FIELD} files are allowed for {field}",
                field=field,
            )
        if files:
            payload[field] = [store_upload(f, field) for f in files]
    return payload
