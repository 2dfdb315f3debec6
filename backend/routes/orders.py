import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import PlainTextResponse

from config.constants import ORDERS, USERS
from database import DocumentStore, get_store
from models.documents import build_order
from utils.errors import NotFoundError
from utils.keywords import keywords_for
from utils.merge import apply_update
from utils.security import authorize
from utils.serializers import serialize_records
from utils.validators import validate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/orders",
    tags=["Orders"]
)


# ======================================================
# CREATE ORDER
# ======================================================

@router.post("")
async def create_order(
    body: Any = Body(None),
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    data = validate("order", body)

    customer = await store.get(USERS, data.cid)
    if not customer:
        raise NotFoundError("customer does not exist or wrong id")

    keywords = keywords_for(data.customerName, data.contact, data.email)

    await store.add(ORDERS, build_order(data, keywords))

    return PlainTextResponse("Order Created Successfully!")


# ======================================================
# LIST ORDERS
# ======================================================

@router.get("")
async def get_orders(
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    orders = await store.list(ORDERS, order_by="createdAt")
    return serialize_records(orders)


# ======================================================
# UPDATE ORDER (STATUS, ASSIGNMENT, RATINGS)
# ======================================================

@router.patch("")
async def update_order(
    body: Any = Body(None),
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    logger.debug("ORDER_UPDATE payload=%s", body)

    data = validate("order_update", body)

    await apply_update(
        store,
        ORDERS,
        "order",
        data,
        missing_message="order does not exist or wrong id",
    )

    return PlainTextResponse("order Updated")
