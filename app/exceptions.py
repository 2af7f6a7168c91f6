class DomainError(Exception):
    """Base class for errors surfaced to API callers."""

    status = 400
    code = "domain_error"

    def __init__(self, message, **extra):
        super().__init__(message)
        self.message = message
        self.extra = {k: v for k, v in extra.items() if v is not None}


class ValidationError(DomainError):
    status = 400
    code = "validation_error"

    def __init__(self, message, field=None, errors=None):
        super().__init__(message, field=field, errors=errors)
        self.field = field
        self.errors = errors or []


class NotFoundError(DomainError):
    status = 404
    code = "not_found"


class StateError(DomainError):
    status = 409
    code = "invalid_state"


class AuthorizationError(DomainError):
    status = 403
    code = "forbidden"
