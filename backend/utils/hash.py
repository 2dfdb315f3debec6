from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext

from config.env import BCRYPT_ROUNDS
from utils.errors import ValidationError

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)

# bcrypt ignores everything past 72 bytes
MAX_BCRYPT_BYTES = 72


def fits_bcrypt(password: str) -> bool:
    return len(password.encode("utf-8")) <= MAX_BCRYPT_BYTES


def hash_password(password: str) -> str:
    if not fits_bcrypt(password):
        raise ValidationError('"password" must be at most 72 bytes', field="password")
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """
    Compare a login attempt with a stored digest.
    Accounts without a digest, oversized input and malformed digests all fail closed.
    """
    if not hashed_password or not fits_bcrypt(plain_password):
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


# bcrypt is CPU bound; keep it off the event loop

async def hash_password_async(password: str) -> str:
    return await run_in_threadpool(hash_password, password)


async def verify_password_async(plain_password: str, hashed_password: str | None) -> bool:
    return await run_in_threadpool(verify_password, plain_password, hashed_password)
