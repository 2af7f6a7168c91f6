from datetime import datetime, timedelta

import pytest

from app.exceptions import NotFoundError, StateError, ValidationError
from app.services import vendor as vendor_service
from models import db
from models.user import User
from models.vendor import VendorProfile

REASON = "Missing required business documents"


def _submitted_vendor(make_user, email="vendor@example.com", gst="29ABCDE1234F1Z5"):
    user = make_user(email)
    vendor_service.submit_step1(user.id, {"vendorType": "RETAILER"})
    vendor_service.submit_step2(user.id, {
        "businessName": "Acme Traders",
        "businessAddress1": "12 Market Road",
        "city": "Bengaluru",
        "state": "Karnataka",
        "postalCode": "560001",
    })
    vendor_service.submit_step3(user.id, {"verificationType": "gst", "gstNumber": gst})
    db.session.commit()
    return VendorProfile.query.filter_by(user_id=user.id).one()


@pytest.mark.parametrize("reason", [None, "", "   ", "too short", "x" * 501])
def test_reject_requires_reason_of_valid_length(make_user, reason):
    profile = _submitted_vendor(make_user)
    with pytest.raises(ValidationError) as exc:
        vendor_service.decide(profile.id, False, reason)
    assert exc.value.field == "rejectionReason"
    assert profile.verification_status == "pending"


def test_reject_records_reason_and_time(make_user):
    profile = _submitted_vendor(make_user)
    before = datetime.utcnow() - timedelta(seconds=1)
    vendor_service.decide(profile.id, False, f"  {REASON}  ")
    db.session.commit()

    assert profile.verification_status == "rejected"
    assert profile.verified is False
    assert profile.rejection_reason == REASON
    assert profile.rejected_at >= before
    assert profile.is_rejected is True


def test_reason_at_boundaries_is_accepted(make_user):
    profile = _submitted_vendor(make_user)
    vendor_service.decide(profile.id, False, "x" * 10)
    assert profile.rejection_reason == "x" * 10
    vendor_service.decide(profile.id, False, "y" * 500)
    assert profile.rejection_reason == "y" * 500


def test_verify_after_reject_clears_rejection(make_user):
    profile = _submitted_vendor(make_user)
    vendor_service.decide(profile.id, False, REASON)
    vendor_service.decide(profile.id, True)
    db.session.commit()

    assert profile.verification_status == "verified"
    assert profile.verified is True
    assert profile.rejection_reason is None
    assert profile.rejected_at is None


def test_verify_ignores_reason(make_user):
    profile = _submitted_vendor(make_user)
    vendor_service.decide(profile.id, True, "short")
    assert profile.verified is True
    assert profile.rejection_reason is None


def test_decision_on_unknown_vendor(app):
    with pytest.raises(NotFoundError) as exc:
        vendor_service.decide(424242, True)
    assert exc.value.message == "Vendor not found"


def test_decision_allowed_before_submission(vendor):
    profile = VendorProfile.query.filter_by(user_id=vendor.id).one()
    vendor_service.decide(profile.id, True)
    assert profile.verification_status == "verified"


def test_clear_rejection_returns_to_pending(make_user):
    profile = _submitted_vendor(make_user)
    vendor_service.decide(profile.id, False, REASON)
    vendor_service.clear_rejection(profile.id)
    assert profile.verification_status == "pending"
    assert profile.verified is False
    assert profile.rejection_reason is None
    assert profile.rejected_at is None


def test_clear_rejection_needs_rejected_vendor(make_user):
    profile = _submitted_vendor(make_user)
    with pytest.raises(StateError) as exc:
        vendor_service.clear_rejection(profile.id)
    assert "pending" in exc.value.message


def test_bulk_decide_reports_unknown_ids(make_user):
    first = _submitted_vendor(make_user, "a@example.com")
    second = _submitted_vendor(make_user, "b@example.com", gst="27ABCDE1234F1Z5")
    result = vendor_service.bulk_decide([first.id, 999, second.id, first.id], True)

    assert [p.id for p in result.updated] == [first.id, second.id]
    assert result.not_found == [999]
    assert first.verified and second.verified


def test_bulk_reject_validates_reason_before_touching_vendors(make_user):
    profile = _submitted_vendor(make_user)
    with pytest.raises(ValidationError):
        vendor_service.bulk_decide([profile.id], False, "nope")
    assert profile.verification_status == "pending"


def test_bulk_decide_needs_ids(app):
    with pytest.raises(ValidationError) as exc:
        vendor_service.bulk_decide([], True)
    assert exc.value.field == "vendorIds"


def test_verification_stats(make_user):
    pending = _submitted_vendor(make_user, "a@example.com")
    rejected = _submitted_vendor(make_user, "b@example.com")
    make_user("c@example.com")
    vendor_service.decide(rejected.id, False, REASON)
    db.session.commit()

    stats = vendor_service.verification_stats()
    assert stats["total"] == 3
    assert stats["by_status"] == {
        "unsubmitted": 1,
        "pending": 1,
        "verified": 0,
        "rejected": 1,
    }
    types = {row["type"]: row["count"] for row in stats["vendor_types"]}
    assert types == {"RETAILER": 2, None: 1}
    assert pending.id != rejected.id


def test_vendor_details(make_user):
    profile = _submitted_vendor(make_user)
    details = vendor_service.get_vendor_details(profile.id)
    assert details["vendor"]["id"] == profile.id
    assert details["user"]["email"] == "vendor@example.com"
    assert details["completion"]["is_complete"] is True
    assert details["verification_status_label"] == "Pending Verification"


def test_vendor_rejection_details(make_user):
    profile = _submitted_vendor(make_user)
    vendor_service.decide(profile.id, False, REASON)
    details = vendor_service.get_vendor_rejection_details(profile.id)
    assert details["vendor_id"] == profile.id
    assert details["business_name"] == "Acme Traders"
    assert details["rejection_reason"] == REASON
    assert details["can_resubmit"] is True


def test_delete_vendor_removes_owner(make_user):
    profile = _submitted_vendor(make_user)
    vendor_id, user_id = profile.id, profile.user_id
    deleted = vendor_service.delete_vendor(vendor_id)
    db.session.commit()

    assert deleted == {"vendor_id": vendor_id, "user_id": user_id}
    assert db.session.get(VendorProfile, vendor_id) is None
    assert db.session.get(User, user_id) is None
