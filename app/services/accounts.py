import logging

from app.exceptions import StateError, ValidationError
from models import db
from models.user import User
from models.vendor import VendorProfile

logger = logging.getLogger(__name__)

SELF_SERVICE_ROLES = ("buyer", "vendor")


def _normalize_role(role) -> str:
    value = str(role or "").strip().lower()
    if value not in SELF_SERVICE_ROLES:
        raise ValidationError("Invalid account type. Must be BUYER or VENDOR", field="role")
    return value


def _attach_vendor_profile(user) -> VendorProfile:
    profile = VendorProfile(profile_step=1, verified=False)
    user.vendor_profile = profile
    db.session.add(profile)
    return profile


def register_user(email, first_name=None, last_name=None, role=None) -> User:
    """Create a user; vendors get their empty profile in the same transaction.

    Does NOT commit; run inside ``transactional`` so a user is never left
    without its vendor profile.
    """
    email = (email or "").strip().lower()
    if not email:
        raise ValidationError("email is required", field="email")
    if User.query.filter_by(email=email).first():
        raise ValidationError("User with this email already exists", field="email")
    user = User(
        email=email,
        first_name=first_name,
        last_name=last_name,
        role=_normalize_role(role) if role else None,
    )
    db.session.add(user)
    if user.role == "vendor":
        _attach_vendor_profile(user)
    db.session.flush()
    logger.info("user %s registered as %s", user.id, user.role or "unassigned")
    return user


def select_account_type(user, role) -> User:
    """Delayed account type choice for users created without a role (OAuth)."""
    if user.role:
        raise StateError("Account type already selected")
    user.role = _normalize_role(role)
    if user.role == "vendor":
        _attach_vendor_profile(user)
    db.session.flush()
    logger.info("user %s selected account type %s", user.id, user.role)
    return user


def ensure_vendor_profile(user):
    """Backfill the profile of a vendor account that has none. Returns it or None."""
    if user.role != "vendor":
        return None
    if user.vendor_profile is not None:
        return user.vendor_profile
    profile = _attach_vendor_profile(user)
    db.session.flush()
    logger.warning("created missing vendor profile for user %s", user.id)
    return profile


def upsert_admin(email, first_name="Super", last_name="Admin"):
    email = (email or "").strip().lower()
    user = User.query.filter_by(email=email).first()
    created = user is None
    if created:
        user = User(email=email)
        db.session.add(user)
    user.role = "admin"
    user.first_name = first_name
    user.last_name = last_name
    db.session.flush()
    return user, created
