import logging
from flask import current_app, request
from . import admin_bp
from app.schemas.admin import BulkVerifyRequest, VerificationDecisionRequest
from app.services import vendor as vendor_service
from app.tasks.notifications import notify_vendor_verification_task
from app.utils import ok, transactional, validate_schema

logger = logging.getLogger(__name__)


def _notify(profile):
    args = (profile.user_id, profile.verification_status, profile.rejection_reason)
    if current_app.config.get("TESTING"):
        notify_vendor_verification_task(*args)
        return
    try:
        notify_vendor_verification_task.delay(*args)
    except Exception:
        # the decision is already committed; delivery is best effort
        logger.exception("Failed to queue verification notification for vendor %s", profile.id)


def _decision_payload(profile):
    return {
        "vendor": profile.to_dict(),
        "verification_status_label": vendor_service.verification_label(profile),
    }


@admin_bp.route("/vendors/stats", methods=["GET"])
def vendor_stats():
    return ok(vendor_service.verification_stats(), message="Vendor statistics fetched successfully")


@admin_bp.route("/vendors/<int:vendor_id>", methods=["GET"])
def vendor_details(vendor_id):
    data = vendor_service.get_vendor_details(vendor_id)
    return ok(data, message="Vendor details fetched successfully")


@admin_bp.route("/vendors/<int:vendor_id>", methods=["DELETE"])
def delete_vendor(vendor_id):
    with transactional("Failed to delete vendor"):
        data = vendor_service.delete_vendor(vendor_id)
    return ok(data, message="Vendor deleted successfully")


@admin_bp.route("/vendors/<int:vendor_id>/verify", methods=["PUT"])
@validate_schema(VerificationDecisionRequest)
def verify_vendor(vendor_id):
    data: VerificationDecisionRequest = request.validated_data
    with transactional("Failed to update vendor verification"):
        profile = vendor_service.decide(vendor_id, data.verified, data.rejectionReason)
    _notify(profile)
    if data.verified:
        message = "Vendor verified successfully"
    else:
        message = f"Vendor rejected successfully. Reason: {profile.rejection_reason}"
    return ok(_decision_payload(profile), message=message)


@admin_bp.route("/vendors/<int:vendor_id>/clear-rejection", methods=["POST"])
def clear_vendor_rejection(vendor_id):
    with transactional("Failed to clear vendor rejection"):
        profile = vendor_service.clear_rejection(vendor_id)
    _notify(profile)
    return ok(
        _decision_payload(profile),
        message="Vendor rejection cleared successfully. Vendor can now resubmit for verification.",
    )


@admin_bp.route("/vendors/<int:vendor_id>/rejection-details", methods=["GET"])
def vendor_rejection_details(vendor_id):
    data = vendor_service.get_vendor_rejection_details(vendor_id)
    return ok(data, message="Vendor rejection details fetched successfully")


@admin_bp.route("/vendors/bulk-verify", methods=["PUT"])
@validate_schema(BulkVerifyRequest)
def bulk_verify_vendors():
    data: BulkVerifyRequest = request.validated_data
    with transactional("Failed to bulk update vendor verification"):
        result = vendor_service.bulk_decide(data.vendorIds, data.verified, data.rejectionReason)
    for profile in result.updated:
        _notify(profile)
    return ok(
        {
            "updated": [p.id for p in result.updated],
            "not_found": result.not_found,
        },
        message=f"{len(result.updated)} vendor(s) updated",
    )
