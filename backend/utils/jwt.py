from datetime import datetime, timedelta

from jose import jwt

from config.env import Settings


def _require_jwt_secret(settings: Settings) -> str:
    secret = (settings.jwt_secret or "").strip()
    if not secret:
        raise RuntimeError("JWT_SECRET is not configured")
    return secret


def create_access_token(payload: dict, settings: Settings) -> str:
    payload = payload.copy()
    payload.update({
        "exp": datetime.utcnow() + timedelta(days=settings.access_token_days),
        "iat": datetime.utcnow()
    })
    return jwt.encode(payload, _require_jwt_secret(settings), algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Settings) -> dict:
    return jwt.decode(token, _require_jwt_secret(settings), algorithms=[settings.jwt_algorithm])
