import pytest

from app.version import API_PREFIX


def obtain_token(client, email, role="vendor"):
    resp = client.post("/__auth/login_stub", json={"email": email, "role": role})
    return resp.get_json()["data"]


@pytest.fixture
def admin_hdr(client):
    token = obtain_token(client, "admin@example.com", role="admin")["access"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def vendor_id(client):
    return obtain_token(client, "vendor@example.com")["vendor_id"]


def _verify(client, hdr, vendor_id, **body):
    return client.put(f"{API_PREFIX}/admin/vendors/{vendor_id}/verify", json=body, headers=hdr)


def test_reject_without_reason(client, admin_hdr, vendor_id):
    resp = _verify(client, admin_hdr, vendor_id, verified=False)
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["field"] == "rejectionReason"
    assert body["message"] == "Rejection reason is required when rejecting a vendor"


def test_reject_with_short_reason(client, admin_hdr, vendor_id):
    resp = _verify(client, admin_hdr, vendor_id, verified=False, rejectionReason="too short")
    assert resp.status_code == 400
    assert "at least 10 characters" in resp.get_json()["message"]


def test_verify_requires_flag(client, admin_hdr, vendor_id):
    resp = _verify(client, admin_hdr, vendor_id)
    assert resp.status_code == 400
    assert resp.get_json()["field"] == "verified"


def test_reject_then_verify(client, admin_hdr, vendor_id):
    resp = _verify(client, admin_hdr, vendor_id, verified=False,
                   rejectionReason="Missing required business documents")
    assert resp.status_code == 200
    assert resp.get_json()["message"] == (
        "Vendor rejected successfully. Reason: Missing required business documents"
    )

    resp = _verify(client, admin_hdr, vendor_id, verified=True)
    assert resp.status_code == 200
    vendor = resp.get_json()["data"]["vendor"]
    assert vendor["verified"] is True
    assert vendor["rejection_reason"] is None
    assert vendor["rejected_at"] is None


def test_unknown_vendor_is_404(client, admin_hdr):
    resp = _verify(client, admin_hdr, 9999, verified=True)
    assert resp.status_code == 404
    assert resp.get_json()["type"] == "not_found"
    assert client.get(f"{API_PREFIX}/admin/vendors/9999", headers=admin_hdr).status_code == 404


def test_clear_rejection(client, admin_hdr, vendor_id):
    resp = client.post(f"{API_PREFIX}/admin/vendors/{vendor_id}/clear-rejection", headers=admin_hdr)
    assert resp.status_code == 409
    assert resp.get_json()["type"] == "invalid_state"

    _verify(client, admin_hdr, vendor_id, verified=False, rejectionReason="Address proof missing")
    resp = client.get(f"{API_PREFIX}/admin/vendors/{vendor_id}/rejection-details", headers=admin_hdr)
    assert resp.get_json()["data"]["rejection_reason"] == "Address proof missing"

    resp = client.post(f"{API_PREFIX}/admin/vendors/{vendor_id}/clear-rejection", headers=admin_hdr)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["vendor"]["verification_status"] == "pending"


def test_bulk_verify(client, admin_hdr, vendor_id):
    other = obtain_token(client, "other@example.com")["vendor_id"]
    resp = client.put(
        f"{API_PREFIX}/admin/vendors/bulk-verify",
        json={"vendorIds": [vendor_id, other, 777], "verified": True},
        headers=admin_hdr,
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["data"] == {"updated": [vendor_id, other], "not_found": [777]}
    assert body["message"] == "2 vendor(s) updated"

    resp = client.put(
        f"{API_PREFIX}/admin/vendors/bulk-verify",
        json={"vendorIds": [], "verified": True},
        headers=admin_hdr,
    )
    assert resp.status_code == 400


def test_stats_and_details(client, admin_hdr, vendor_id):
    _verify(client, admin_hdr, vendor_id, verified=True)
    stats = client.get(f"{API_PREFIX}/admin/vendors/stats", headers=admin_hdr).get_json()["data"]
    assert stats["total"] == 1
    assert stats["by_status"]["verified"] == 1

    details = client.get(f"{API_PREFIX}/admin/vendors/{vendor_id}", headers=admin_hdr).get_json()["data"]
    assert details["user"]["email"] == "vendor@example.com"
    assert details["verification_status_label"] == "Verified"


def test_delete_vendor(client, admin_hdr, vendor_id):
    resp = client.delete(f"{API_PREFIX}/admin/vendors/{vendor_id}", headers=admin_hdr)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["vendor_id"] == vendor_id
    assert client.get(f"{API_PREFIX}/admin/vendors/{vendor_id}", headers=admin_hdr).status_code == 404
