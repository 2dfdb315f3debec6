from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr


class StrictModel(BaseModel):
    # unknown keys are rejected, never stored; strings may not be empty
    model_config = ConfigDict(extra="forbid", str_min_length=1)


class UpdateModel(StrictModel):
    """
    Base for partial updates: only the record id is mandatory,
    every other field is validated only when present.
    """
    id: str


class Location(StrictModel):
    lat: float
    long: float
    address: str
    city: str
    state: str
    country: str
    pinCode: int


class LineItem(StrictModel):
    id: str
    qty: float
    price: float
    name: str
    unit: str


class OfferRef(StrictModel):
    name: Optional[str] = None
    id: Optional[str] = None


class Quantity(StrictModel):
    value: Optional[float] = None
    unit: Optional[str] = None


class VendorContact(StrictModel):
    contact: str
    email: EmailStr


class VendorContactUpdate(StrictModel):
    contact: Optional[str] = None
    email: Optional[EmailStr] = None
