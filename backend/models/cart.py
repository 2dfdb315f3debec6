from typing import Optional

from models.common import LineItem, OfferRef, UpdateModel


class CartUpdate(UpdateModel):
    # the owner is accepted when sent back, but never reassigned
    cid: Optional[str] = None
    items: Optional[list[LineItem]] = None
    totalCost: Optional[float] = None
    offer: Optional[OfferRef] = None
    discount: Optional[float] = None


class SavedUpdate(UpdateModel):
    cid: Optional[str] = None
    items: Optional[list[LineItem]] = None
