import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import PlainTextResponse

from config.constants import CARTS, SAVED
from database import DocumentStore, get_store
from utils.merge import apply_update
from utils.security import authorize
from utils.validators import validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cart", tags=["Cart"])
saved_router = APIRouter(prefix="/saved", tags=["Saved"])


@router.patch("")
async def update_cart(
    body: Any = Body(None),
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    logger.debug("CART_UPDATE payload=%s", body)

    data = validate("cart_update", body)

    await apply_update(
        store,
        CARTS,
        "cart",
        data,
        missing_message="cart does not exist or wrong id",
    )

    return PlainTextResponse("Cart Updated")


@saved_router.patch("")
async def update_saved(
    body: Any = Body(None),
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    logger.debug("SAVED_UPDATE payload=%s", body)

    data = validate("saved_update", body)

    await apply_update(
        store,
        SAVED,
        "saved",
        data,
        missing_message="Saved does not exist or wrong id",
    )

    return PlainTextResponse("Saved Updated")
