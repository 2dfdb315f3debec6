from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from config.env import Settings, get_settings
from utils.errors import AuthError
from utils.jwt import decode_token

security = HTTPBearer(auto_error=False)


async def authorize(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Decode the bearer token and return its claims."""
    if credentials is None or not credentials.credentials:
        raise AuthError("Access denied. No token provided.")

    try:
        claims = decode_token(credentials.credentials, settings)
    except JWTError:
        raise AuthError("Invalid token.")

    if not claims.get("id"):
        raise AuthError("Invalid token.")

    return claims
