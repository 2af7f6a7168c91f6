from .onboarding.auth import auth_bp
from .vendor import vendor_bp
from .admin import admin_bp


__all__ = [
    'auth_bp',
    'vendor_bp',
    'admin_bp',
]
