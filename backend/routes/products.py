import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import PlainTextResponse

from config.constants import PRODUCTS, USERS
from database import DocumentStore, get_store
from models.documents import build_product
from utils.errors import DuplicateError, NotFoundError
from utils.keywords import keywords_for
from utils.merge import apply_update
from utils.security import authorize
from utils.serializers import serialize_records
from utils.validators import validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


# =========================
# SELLER CREATE PRODUCT
# =========================

@router.post("")
async def create_product(
    body: Any = Body(None),
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    data = validate("product", body)

    seller = await store.get(USERS, data.vid)
    if not seller:
        raise NotFoundError("Vendor does not exist or wrong id")

    duplicates = await store.query(
        PRODUCTS,
        {
            "name": data.name,
            "vid": data.vid,
            "manufacturer": data.manufacturer,
        },
        limit=1,
    )
    if duplicates:
        raise DuplicateError("Product with same attributes already exist")

    keywords = keywords_for(data.name, data.brand)

    await store.add(PRODUCTS, build_product(data, keywords))

    return PlainTextResponse("Product Created Successfully!")


# =========================
# LIST PRODUCTS
# =========================

@router.get("")
async def get_products(
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    products = await store.list(PRODUCTS, order_by="name")
    return serialize_records(products)


# =========================
# UPDATE PRODUCT
# =========================

@router.patch("")
async def update_product(
    body: Any = Body(None),
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    logger.debug("PRODUCT_UPDATE payload=%s", body)

    data = validate("product_update", body)

    await apply_update(
        store,
        PRODUCTS,
        "product",
        data,
        missing_message="product does not exist or wrong id",
    )

    return PlainTextResponse("product Updated")
