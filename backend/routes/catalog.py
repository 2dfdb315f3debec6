from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import PlainTextResponse

from config.constants import CATEGORIES, OFFERS
from database import DocumentStore, get_store
from models.documents import build_category, build_offer
from utils.errors import DuplicateError, NotFoundError
from utils.security import authorize
from utils.serializers import serialize_records
from utils.validators import validate

categories_router = APIRouter(prefix="/categories", tags=["Categories"])
offers_router = APIRouter(prefix="/offers", tags=["Offers"])


async def _delete_existing(store: DocumentStore, collection: str, body, missing_message: str):
    data = validate("delete", body)

    record = await store.get(collection, data.id)
    if not record:
        raise NotFoundError(missing_message)

    await store.delete(collection, data.id)


# ======================================================
# CATEGORIES
# ======================================================

@categories_router.post("")
async def create_category(
    body: Any = Body(None),
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    data = validate("category", body)

    duplicates = await store.query(CATEGORIES, {"name": data.name}, limit=1)
    if duplicates:
        raise DuplicateError("Category with same attributes already exist")

    await store.add(CATEGORIES, build_category(data))

    return PlainTextResponse("Category created successfully!")


@categories_router.get("")
async def get_categories(
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    categories = await store.list(CATEGORIES, order_by="name")
    return serialize_records(categories)


@categories_router.post("/delete")
async def delete_category(
    body: Any = Body(None),
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    await _delete_existing(store, CATEGORIES, body, "category does not exist or wrong id")
    return PlainTextResponse("Category Deleted")


# ======================================================
# OFFERS / DISCOUNTS
# ======================================================

@offers_router.post("")
async def create_offer(
    body: Any = Body(None),
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    data = validate("offer", body)

    duplicates = await store.query(OFFERS, {"name": data.name, "code": data.code}, limit=1)
    if duplicates:
        raise DuplicateError("Offer with same attributes already exist")

    await store.add(OFFERS, build_offer(data))

    return PlainTextResponse("Offer created successfully!")


@offers_router.get("")
async def get_offers(
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    offers = await store.list(OFFERS, order_by="name")
    return serialize_records(offers)


@offers_router.post("/delete")
async def delete_offer(
    body: Any = Body(None),
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    await _delete_existing(store, OFFERS, body, "Offer does not exist or wrong id")
    return PlainTextResponse("Offer Deleted")
