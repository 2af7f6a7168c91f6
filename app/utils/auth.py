from functools import wraps
from flask import request, g
from .responses import error
from app.auth.permissions import role_has_scope
from app.exceptions import AuthorizationError
from .jwt import decode_token, TokenError
from models import db
from models.user import User


def auth_required(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        auth = request.headers.get("Authorization", "")
        if not auth:
            return error("Auth header missing", status=401)
        token = auth.split(" ", 1)[1] if auth.startswith("Bearer ") else auth
        try:
            payload = decode_token(token, expected_type="access")
        except TokenError as e:
            return error(str(e), status=401)

        try:
            user_id = int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            return error("invalid token", status=401)
        user = db.session.get(User, user_id)
        if not user:
            return error("User not found", status=401)

        g.user_id = user.id
        g.role = user.role or payload.get("role")
        request.user = user
        return func(*args, **kwargs)

    return wrapper


def _to_set(obj):
    return set(obj) if isinstance(obj, (list, tuple, set)) else {obj}


def role_required(required):
    """Authorize based on user role or scoped action."""
    required_set = _to_set(required)

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            role = getattr(g, "role", None)
            if not role:
                raise AuthorizationError("Role missing")
            for entry in required_set:
                if ":" in entry:
                    r, action = entry.split(":", 1)
                    if role == r and role_has_scope(role, action):
                        break
                else:
                    if role == entry:
                        break
            else:
                raise AuthorizationError("Forbidden")
            return fn(*args, **kwargs)

        return wrapper

    return decorator
