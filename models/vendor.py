from enum import Enum
from datetime import datetime

from models import db


class VendorType(str, Enum):
    MANUFACTURER = "MANUFACTURER"
    WHOLESALER = "WHOLESALER"
    RETAILER = "RETAILER"


class VerificationType(str, Enum):
    GST = "gst"
    MANUAL = "manual"


class IdType(str, Enum):
    AADHAAR = "aadhaar"
    PAN = "pan"


class VerificationStatus(str, Enum):
    """Review state; a null column means nothing has been submitted yet."""

    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class VendorProfile(db.Model):
    __tablename__ = "vendor_profile"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("user.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    # step 1
    vendor_type = db.Column(db.String(20), nullable=True)

    # step 2
    business_name = db.Column(db.String(100), nullable=True)
    business_address1 = db.Column(db.String(200), nullable=True)
    business_address2 = db.Column(db.String(200), nullable=True)
    city = db.Column(db.String(50), nullable=True)
    state = db.Column(db.String(50), nullable=True)
    postal_code = db.Column(db.String(6), nullable=True)
    business_logo = db.Column(db.String(500), nullable=True)

    # step 3
    verification_type = db.Column(db.String(10), nullable=True)
    gst_number = db.Column(db.String(15), nullable=True)
    gst_document = db.Column(db.String(500), nullable=True)
    id_type = db.Column(db.String(10), nullable=True)
    id_number = db.Column(db.String(12), nullable=True)
    other_documents = db.Column(db.JSON, nullable=True)

    profile_step = db.Column(db.Integer, nullable=False, default=1)
    verified = db.Column(db.Boolean, nullable=False, default=False)
    verification_status = db.Column(db.String(10), nullable=True, index=True)
    rejection_reason = db.Column(db.String(500), nullable=True)
    rejected_at = db.Column(db.DateTime, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="vendor_profile")

    def __repr__(self):
        return f"<VendorProfile id={self.id} status={self.verification_status}>"

    @property
    def status(self):
        if self.verification_status is None:
            return None
        return VerificationStatus(self.verification_status)

    @property
    def is_rejected(self) -> bool:
        return self.verification_status == VerificationStatus.REJECTED.value

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "vendor_type": self.vendor_type,
            "business_name": self.business_name,
            "business_address1": self.business_address1,
            "business_address2": self.business_address2,
            "city": self.city,
            "state": self.state,
            "postal_code": self.postal_code,
            "business_logo": self.business_logo,
            "verification_type": self.verification_type,
            "gst_number": self.gst_number,
            "gst_document": self.gst_document,
            "id_type": self.id_type,
            "id_number": self.id_number,
            "other_documents": list(self.other_documents or []),
            "profile_step": self.profile_step,
            "verified": self.verified,
            "verification_status": self.verification_status,
            "rejection_reason": self.rejection_reason,
            "rejected_at": self.rejected_at.isoformat() if self.rejected_at else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
