import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import PlainTextResponse

from config.constants import CARTS, ROLE_CUSTOMER, SAVED, USERS
from config.env import Settings, get_settings
from database import DocumentStore, get_store
from models.documents import build_account, build_cart, build_saved
from utils.errors import AuthError, DuplicateError, NotFoundError
from utils.hash import hash_password_async, verify_password_async
from utils.jwt import create_access_token
from utils.validators import validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


# ======================
# Create User (register)
# ======================

@router.post("/register")
async def create_user(
    body: Any = Body(None),
    store: DocumentStore = Depends(get_store),
):
    account = validate("user", body)

    existing = await store.query(USERS, {"email": account.email}, limit=1)
    if existing:
        raise DuplicateError("Email Already Registered")

    password_hash = await hash_password_async(account.password)

    user_id = await store.add(USERS, build_account(account, password_hash))

    # not transactional: the account stays even if the lists fail
    if account.role == ROLE_CUSTOMER:
        try:
            await store.add(CARTS, build_cart(user_id))
            await store.add(SAVED, build_saved(user_id))
        except Exception:
            logger.exception("CUSTOMER_LISTS_ERROR user=%s", user_id)
            raise

    return PlainTextResponse("User Created Successfully!")


# ======================
# Authenticate (login)
# ======================

@router.post("/login")
async def authenticate(
    body: Any = Body(None),
    store: DocumentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    data = validate("auth", body)

    users = await store.query(USERS, {"email": data.email}, limit=1)
    if not users:
        raise AuthError("Invalid Email Address")

    user = users[0]
    valid = await verify_password_async(data.password, user.get("password"))
    if not valid:
        raise AuthError("Invalid Password")

    token = create_access_token({
        "id": str(user["_id"]),
        "role": user.get("role"),
    }, settings)

    return PlainTextResponse(token)


# ======================
# Forgot Password
# ======================

@router.post("/forgot-password")
async def forgot_password(
    body: Any = Body(None),
    store: DocumentStore = Depends(get_store),
):
    data = validate("forgot", body)

    users = await store.query(USERS, {"email": data.email}, limit=1)
    if not users:
        raise AuthError("Invalid Email Address")

    # TODO: email a reset link once a mail provider is configured
    return PlainTextResponse("Password reset requested, Please check your email")


# ======================
# Reset Password
# ======================

@router.post("/reset-password")
async def reset_password(
    body: Any = Body(None),
    store: DocumentStore = Depends(get_store),
):
    data = validate("reset", body)

    user = await store.get(USERS, data.id)
    if not user:
        raise NotFoundError("User does not exist")

    valid = await verify_password_async(data.oldPassword, user.get("password"))
    if not valid:
        raise AuthError("Invalid Current Password")

    password_hash = await hash_password_async(data.password)

    await store.set(USERS, data.id, {"password": password_hash}, merge=True)

    return PlainTextResponse("Password changed successfully, Please login again")
