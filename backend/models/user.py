from typing import Optional, Union

from pydantic import EmailStr, Field

from config.constants import (
    ROLE_CUSTOMER,
    ROLE_DELIVERY,
    ROLE_EMPLOYEE,
    ROLE_VENDOR,
)
from models.common import Location, StrictModel, UpdateModel


# =====================================================
# REGISTRATION (ONE VARIANT PER ROLE)
# =====================================================

class AccountCreate(StrictModel):
    fullName: str
    contactNumber: str = Field(..., min_length=10, max_length=10)
    email: EmailStr
    password: str = Field(..., min_length=5, max_length=255)
    role: str

    def role_fields(self) -> dict:
        return {}


class StaffAccountCreate(AccountCreate):
    """Vendors, employees and delivery staff: photo required, duty flag tracked."""

    location: Optional[Location] = None
    profilePic: str

    def role_fields(self) -> dict:
        return {
            "profilePic": self.profilePic,
            "onDuty": False,
        }


class VendorCreate(StaffAccountCreate):
    pass


class EmployeeCreate(StaffAccountCreate):
    pass


class DeliveryCreate(StaffAccountCreate):
    pass


class CustomerCreate(AccountCreate):
    location: Union[Location, list[Location]]
    # accepted on input, but every new wallet starts empty
    wallet: Optional[float] = None

    def role_fields(self) -> dict:
        return {"wallet": 0}


ACCOUNT_SCHEMAS = {
    ROLE_VENDOR: VendorCreate,
    ROLE_EMPLOYEE: EmployeeCreate,
    ROLE_DELIVERY: DeliveryCreate,
    ROLE_CUSTOMER: CustomerCreate,
}


def account_schema_for(role) -> type[AccountCreate]:
    # unknown or missing roles register with the customer rules
    if not isinstance(role, str):
        return CustomerCreate
    return ACCOUNT_SCHEMAS.get(role, CustomerCreate)


# =====================================================
# SELF-SERVICE / ADMIN UPDATE
# =====================================================

class AccountUpdate(UpdateModel):
    fullName: Optional[str] = None
    contactNumber: Optional[str] = Field(None, min_length=10, max_length=10)
    location: Optional[Union[Location, list[Location]]] = None
    email: Optional[EmailStr] = None
    wallet: Optional[float] = None
    profilePic: Optional[str] = None
    status: Optional[str] = None
    onDuty: Optional[bool] = None


# =====================================================
# CREDENTIALS
# =====================================================

class AuthRequest(StrictModel):
    email: EmailStr
    password: str = Field(..., min_length=5, max_length=255)


class ForgotPasswordRequest(StrictModel):
    email: EmailStr


class ResetPasswordRequest(StrictModel):
    password: str = Field(..., min_length=5, max_length=255)
    oldPassword: str = Field(..., min_length=5, max_length=255)
    id: str
