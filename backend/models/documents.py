"""
Canonical stored shapes.

Each builder copies an explicit allow-list from a validated input,
injects the entity's initial values and stamps the creation time.
Anything outside the allow-list is dropped.
"""

from collections.abc import Mapping

from pydantic import BaseModel

from config.constants import (
    ACCOUNT_ACTIVE,
    NO_OFFER,
    ORDER_PLACED,
    PRODUCT_AVAILABLE,
)
from database import SERVER_TIMESTAMP
from models.user import AccountCreate

ACCOUNT_FIELDS = ("fullName", "contactNumber", "email", "role", "location")

PRODUCT_FIELDS = (
    "name", "manufacturer", "category", "brand", "vid", "images", "price",
    "offer", "qty", "description", "features", "otherNames", "life", "rating",
)

CATEGORY_FIELDS = ("name", "description", "image", "offer")

OFFER_FIELDS = ("name", "code", "discount", "unit")

ORDER_FIELDS = (
    "customerName", "contact", "email", "cid", "location", "items",
    "totalCost", "offer", "discount", "finalCost", "paymentStatus",
    "paymentType", "timeAssigned", "comment", "vid", "vendor", "vendorName",
)


def _as_mapping(data) -> Mapping:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_none=True)
    return data


def _pick(data, fields) -> dict:
    source = _as_mapping(data)
    return {
        field: source[field]
        for field in fields
        if source.get(field) is not None
    }


def build_account(account: AccountCreate, password_hash: str) -> dict:
    doc = _pick(account, ACCOUNT_FIELDS)
    doc.update(account.role_fields())
    doc.update({
        "password": password_hash,
        "status": ACCOUNT_ACTIVE,
        "createdAt": SERVER_TIMESTAMP,
    })
    return doc


def build_product(data, keywords: list[str]) -> dict:
    doc = _pick(data, PRODUCT_FIELDS)
    doc.update({
        "code": doc["name"].upper(),
        "keywords": list(keywords),
        "status": PRODUCT_AVAILABLE,
        "createdAt": SERVER_TIMESTAMP,
    })
    return doc


def build_category(data) -> dict:
    doc = _pick(data, CATEGORY_FIELDS)
    doc["createdAt"] = SERVER_TIMESTAMP
    return doc


def build_offer(data) -> dict:
    doc = _pick(data, OFFER_FIELDS)
    doc["createdAt"] = SERVER_TIMESTAMP
    return doc


def build_order(data, keywords: list[str]) -> dict:
    doc = _pick(data, ORDER_FIELDS)
    doc.update({
        "orderRating": 0,
        "deliveryRating": 0,
        "vendorRating": 0,
        "status": ORDER_PLACED,
        "keywords": list(keywords),
        "createdAt": SERVER_TIMESTAMP,
    })
    return doc


def build_cart(cid: str) -> dict:
    return {
        "items": [],
        "totalCost": 0,
        "offer": NO_OFFER,
        "discount": 0,
        "cid": cid,
        "createdAt": SERVER_TIMESTAMP,
    }


def build_saved(cid: str) -> dict:
    return {
        "items": [],
        "cid": cid,
        "createdAt": SERVER_TIMESTAMP,
    }
