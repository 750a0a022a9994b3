from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt
from fastapi import Header, Request

from .config import settings
from .errors import AuthError
from .utils.event_logger import log_auth_event

pwd_context = CryptContext(schemes=[settings.PASSWORD_HASH_SCHEME], deprecated="auto")

BEARER_SCHEME = "bearer"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {"id": user_id, "sub": str(user_id), "iat": now, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access_token(token: str) -> int:
    """
    Verify a token's signature and expiry and return the user id it carries.

    Raises:
        AuthError: If the token is malformed, expired, badly signed or does
                   not carry an integer user id
    """
    try:
        data = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"require": ["exp"]},
        )
    except jwt.InvalidTokenError as exc:
        raise AuthError("Invalid or expired token") from exc

    user_id = data.get("id")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise AuthError("Invalid or expired token")
    return user_id

def extract_token(authorization: Optional[str]) -> Optional[str]:
    """Accept both a raw token and the standard ``Bearer <token>`` form."""
    if not authorization or not authorization.strip():
        return None
    value = authorization.strip()
    scheme, _, credentials = value.partition(" ")
    if scheme.lower() == BEARER_SCHEME:
        value = credentials.strip()
    return value or None


def authenticate(
    request: Request,
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> int:
    """
    Authentication gate for protected routes.

    Verifies the bearer token and attaches the user id to ``request.state``.
    Stateless: the token is trusted without a storage lookup.
    """
    token = extract_token(authorization)
    if token is None:
        raise AuthError("Authentication required")

    try:
        user_id = decode_access_token(token)
    except AuthError:
        log_auth_event("token_rejected", request, path=request.url.path)
        raise

    request.state.user_id = user_id
    return user_id
