import logging
from celery import shared_task

from celery_app import celery_app  # noqa: F401

logger = logging.getLogger(__name__)

MESSAGES = {
    "verified": "Your vendor account has been verified.",
    "rejected": "Your vendor verification was rejected: {reason}",
    "pending": "Your vendor verification is pending review again.",
}


def build_message(status: str, reason: str = None) -> str:
    template = MESSAGES.get(status, "Your vendor verification status is now {status}.")
    return template.format(reason=reason or "", status=status)


@shared_task(bind=True, max_retries=3, default_retry_delay=60)
def notify_vendor_verification_task(self, user_id: int, status: str, reason: str = None) -> str:
    """Log the vendor notification; delivery is handled outside this service."""
    message = build_message(status, reason)
    logger.info("[notification] vendor user %s: %s", user_id, message)
    return message
