"""Password hashing and bearer-token helpers shared across domains.

Tokens are HMAC-signed JWTs whose ``sub`` claim carries the user id. The
signing secret, algorithm and lifetime come from the environment:

    JWT_SECRET       signing secret (a development default is used when unset)
    JWT_ALGORITHM    defaults to HS256
    JWT_EXPIRES_IN   token lifetime in seconds, defaults to one day
"""

import os
from datetime import UTC, datetime, timedelta

import jwt
import structlog
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pwdlib import PasswordHash

logger = structlog.get_logger(__name__)

NOT_LOGGED_IN = "The user is not logged in"

bearer_scheme = HTTPBearer(auto_error=False)


def _get_password_hasher() -> PasswordHash:
    if not hasattr(_get_password_hasher, "cached_instance"):
        _get_password_hasher.cached_instance = PasswordHash.recommended()
    return _get_password_hasher.cached_instance


def hash_password(password: str) -> str:
    """Hash a password using Argon2."""
    return _get_password_hasher().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return _get_password_hasher().verify(plain_password, hashed_password)


def _jwt_secret() -> str:
    return os.getenv("JWT_SECRET", "travelguide-dev-secret")


def _jwt_algorithm() -> str:
    return os.getenv("JWT_ALGORITHM", "HS256")


def _jwt_expires_in() -> int:
    return int(os.getenv("JWT_EXPIRES_IN", "86400"))


def create_access_token(user_id: str) -> str:
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=_jwt_expires_in())).timestamp()),
    }
    return jwt.encode(payload, _jwt_secret(), algorithm=_jwt_algorithm())


def decode_access_token(token: str) -> str:
    """Verify ``token`` and return the user id it was issued for.

    Raises:
        HTTPException: 401 when the token is expired, malformed or carries no subject.
    """
    try:
        payload = jwt.decode(token, _jwt_secret(), algorithms=[_jwt_algorithm()])
    except jwt.PyJWTError as exc:
        logger.info("token_rejected", reason=str(exc))
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=NOT_LOGGED_IN) from exc

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=NOT_LOGGED_IN)
    return user_id


async def require_caller(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """FastAPI dependency returning the authenticated caller's user id."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=NOT_LOGGED_IN)
    return decode_access_token(credentials.credentials)
