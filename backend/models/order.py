from datetime import datetime
from typing import Optional

from pydantic import EmailStr

from models.common import (
    LineItem,
    Location,
    OfferRef,
    StrictModel,
    UpdateModel,
    VendorContact,
    VendorContactUpdate,
)


class OrderCreate(StrictModel):
    customerName: str
    contact: str
    email: EmailStr
    cid: str
    location: Optional[Location] = None
    vid: Optional[str] = None
    items: list[LineItem]
    totalCost: float
    offer: OfferRef
    discount: float
    finalCost: float
    orderRating: Optional[float] = None
    deliveryRating: Optional[float] = None
    vendorRating: Optional[float] = None
    status: Optional[str] = None
    comment: Optional[str] = None
    paymentStatus: str
    paymentType: str
    timeAssigned: datetime
    timeDelivered: Optional[datetime] = None
    deliveryBoy: Optional[str] = None
    did: Optional[str] = None
    vendor: Optional[VendorContact] = None
    vendorName: Optional[str] = None


class OrderUpdate(UpdateModel):
    customerName: Optional[str] = None
    contact: Optional[str] = None
    email: Optional[EmailStr] = None
    # validated but never written after creation
    cid: Optional[str] = None
    location: Optional[Location] = None
    vid: Optional[str] = None
    items: Optional[list[LineItem]] = None
    totalCost: Optional[float] = None
    offer: Optional[OfferRef] = None
    discount: Optional[float] = None
    finalCost: Optional[float] = None
    orderRating: Optional[float] = None
    deliveryRating: Optional[float] = None
    vendorRating: Optional[float] = None
    status: Optional[str] = None
    comment: Optional[str] = None
    paymentStatus: Optional[str] = None
    paymentType: Optional[str] = None
    timeAssigned: Optional[datetime] = None
    timeDelivered: Optional[datetime] = None
    deliveryBoy: Optional[str] = None
    did: Optional[str] = None
    vendor: Optional[VendorContactUpdate] = None
    vendorName: Optional[str] = None
