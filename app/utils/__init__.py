from .responses import ok, error
from .auth import auth_required, role_required
from .validation import parse_model, validate_schema
from .db import transactional
from .jwt import (
    create_access_token,
    decode_token,
    TokenError,
)

__all__ = [
    'ok',
    'error',
    'auth_required',
    'role_required',
    'create_access_token',
    'decode_token',
    'TokenError',
    'parse_model',
    'validate_schema',
    'transactional',
]
