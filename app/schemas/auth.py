from typing import Optional
from pydantic import BaseModel, constr


class RegisterRequest(BaseModel):
    email: constr(strip_whitespace=True, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    firstName: Optional[constr(strip_whitespace=True, max_length=100)] = None
    lastName: Optional[constr(strip_whitespace=True, max_length=100)] = None
    role: Optional[str] = None


class AccountTypeRequest(BaseModel):
    role: str
