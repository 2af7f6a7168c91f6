from typing import List, Optional
from pydantic import BaseModel, Field


class VerificationDecisionRequest(BaseModel):
    verified: bool
    rejectionReason: Optional[str] = None


class BulkVerifyRequest(BaseModel):
    vendorIds: List[int] = Field(min_length=1)
    verified: bool
    rejectionReason: Optional[str] = None
