import re
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from app.exceptions import ValidationError
from app.utils.validation import parse_model
from models.vendor import IdType, VendorType, VerificationType

POSTAL_CODE_RE = re.compile(r"[0-9]{6}")
GSTIN_RE = re.compile(r"[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]")
PAN_RE = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]")
AADHAAR_RE = re.compile(r"[0-9]{12}")


class CamelModel(BaseModel):
    """Accepts camelCase keys from clients and snake_case from Python callers."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


def _check_length(value: str, label: str, min_len: int, max_len: int) -> str:
    if len(value) < min_len:
        raise ValueError(f"{label} must be at least {min_len} characters")
    if len(value) > max_len:
        raise ValueError(f"{label} too long")
    return value


class Step1Request(CamelModel):
    vendor_type: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("vendor_type")
    @classmethod
    def _vendor_type(cls, v: Optional[str]) -> str:
        v = (v or "").strip().upper()
        if not v:
            raise ValueError("Vendor type is required")
        if v not in VendorType.__members__:
            raise ValueError("Invalid vendor type. Must be MANUFACTURER, WHOLESALER, or RETAILER")
        return v


class Step2Request(CamelModel):
    business_name: str
    business_address1: str
    business_address2: Optional[str] = ""
    city: str
    state: str
    postal_code: str
    business_logo: Optional[str] = None

    @field_validator("postal_code", mode="before")
    @classmethod
    def _postal_code_as_text(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("business_name")
    @classmethod
    def _business_name(cls, v: str) -> str:
        return _check_length(v, "Business name", 2, 100)

    @field_validator("business_address1")
    @classmethod
    def _business_address1(cls, v: str) -> str:
        return _check_length(v, "Business address", 5, 200)

    @field_validator("business_address2")
    @classmethod
    def _business_address2(cls, v: Optional[str]) -> str:
        return _check_length(v or "", "Business address line 2", 0, 200)

    @field_validator("city")
    @classmethod
    def _city(cls, v: str) -> str:
        return _check_length(v, "City", 2, 50)

    @field_validator("state")
    @classmethod
    def _state(cls, v: str) -> str:
        return _check_length(v, "State", 2, 50)

    @field_validator("postal_code")
    @classmethod
    def _postal_code(cls, v: str) -> str:
        if not POSTAL_CODE_RE.fullmatch(v):
            raise ValueError("Postal code must be exactly 6 digits")
        return v


class GstVerification(CamelModel):
    verification_type: Literal["gst"]
    gst_number: Optional[str] = Field(default=None, validate_default=True)
    gst_document: Optional[str] = None

    @field_validator("gst_number")
    @classmethod
    def _gst_number(cls, v: Optional[str]) -> str:
        v = (v or "").strip().upper()
        if not v:
            raise ValueError("GST number is required for GST verification")
        if not GSTIN_RE.fullmatch(v):
            raise ValueError("Invalid GST number format")
        return v


class ManualVerification(CamelModel):
    verification_type: Literal["manual"]
    id_type: Optional[str] = Field(default=None, validate_default=True)
    id_number: Optional[str] = Field(default=None, validate_default=True)
    other_documents: List[str] = Field(default_factory=list)

    @field_validator("other_documents", mode="before")
    @classmethod
    def _single_document(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("id_type")
    @classmethod
    def _id_type(cls, v: Optional[str]) -> str:
        v = (v or "").strip().lower()
        if not v:
            raise ValueError("ID type and ID number are required for manual verification")
        if v not in {t.value for t in IdType}:
            raise ValueError('Invalid ID type. Must be "aadhaar" or "pan"')
        return v

    @field_validator("id_number")
    @classmethod
    def _id_number(cls, v: Optional[str], info: ValidationInfo) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("ID type and ID number are required for manual verification")
        id_type = info.data.get("id_type")
        if id_type == IdType.PAN.value:
            v = v.upper()
            if not PAN_RE.fullmatch(v):
                raise ValueError("Invalid PAN format. Should be like ABCDE1234F")
        elif id_type == IdType.AADHAAR.value:
            v = re.sub(r"\s", "", v)
            if not AADHAAR_RE.fullmatch(v):
                raise ValueError("Invalid Aadhaar format. Should be 12 digits")
        return v


VerificationDetails = Annotated[
    Union[GstVerification, ManualVerification],
    Field(discriminator="verification_type"),
]


def parse_verification(data) -> Union[GstVerification, ManualVerification]:
    """Validate a step 3 payload into exactly one verification branch."""
    data = dict(data or {})
    raw = data.pop("verificationType", None)
    if raw is None:
        raw = data.pop("verification_type", None)
    verification_type = str(raw or "").strip().lower()
    if not verification_type:
        raise ValidationError("Verification type is required", field="verificationType")
    if verification_type not in {t.value for t in VerificationType}:
        raise ValidationError(
            'Invalid verification type. Must be "gst" or "manual"',
            field="verificationType",
        )
    data["verificationType"] = verification_type
    return parse_model(VerificationDetails, data)
