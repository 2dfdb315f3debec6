from typing import Optional, Union

from models.common import OfferRef, Quantity, StrictModel, UpdateModel


class ProductCreate(StrictModel):
    name: str
    manufacturer: str
    brand: str
    vid: str
    images: list[str]
    price: float
    offer: OfferRef
    qty: Optional[Quantity] = None
    description: str
    features: str
    otherNames: Optional[Union[list[str], str]] = None
    life: str
    rating: float
    category: str
    status: Optional[str] = None


class ProductUpdate(UpdateModel):
    name: Optional[str] = None
    images: Optional[list[str]] = None
    price: Optional[float] = None
    offer: Optional[OfferRef] = None
    qty: Optional[Quantity] = None
    description: Optional[str] = None
    features: Optional[str] = None
    otherNames: Optional[list[str]] = None
    life: Optional[str] = None
    rating: Optional[float] = None
    status: Optional[str] = None
