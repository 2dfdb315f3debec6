import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import PlainTextResponse

from config.constants import USERS
from database import DocumentStore, get_store
from utils.merge import apply_update
from utils.security import authorize
from utils.serializers import serialize_records
from utils.validators import validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("")
async def get_users(
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    users = await store.list(USERS, order_by="fullName")
    return serialize_records(users, hidden=("password",))


@router.patch("")
async def update_user(
    body: Any = Body(None),
    claims: dict = Depends(authorize),
    store: DocumentStore = Depends(get_store),
):
    logger.debug("USER_UPDATE payload=%s", body)

    data = validate("user_update", body)

    await apply_update(
        store,
        USERS,
        "user",
        data,
        missing_message="User does not exist or wrong id",
    )

    return PlainTextResponse("user Updated")
