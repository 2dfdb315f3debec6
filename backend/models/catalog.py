from typing import Optional

from models.common import StrictModel


class CategoryCreate(StrictModel):
    name: str
    image: str
    offer: Optional[str] = None
    description: str


class OfferCreate(StrictModel):
    name: str
    discount: float
    unit: str
    code: str


class DeleteRequest(StrictModel):
    id: str
