"""
Static API token guard and password hashing
"""
from fastapi import Header
from passlib.context import CryptContext
from typing import Optional
import hmac
import logging
import re

from app.config import settings
from app.core.exceptions import AuthenticationError

logger = logging.getLogger("work_ledger.security")

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

_BEARER_PREFIX = re.compile(r"^Bearer\s+", re.IGNORECASE)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def extract_token(authorization: str) -> str:
    """Strip an optional ``Bearer`` prefix from an Authorization header value"""
    return _BEARER_PREFIX.sub("", authorization.strip(), count=1)


def require_api_token(authorization: Optional[str] = Header(None)) -> None:
    """Dependency guarding every ledger route with the configured API token"""
    if not authorization:
        raise AuthenticationError("API token not provided")

    expected = settings.api_token
    if not expected:
        logger.warning("API_TOKEN is not configured; rejecting request")
        raise AuthenticationError("Invalid API token")

    token = extract_token(authorization)
    if not hmac.compare_digest(token.encode("utf-8"), expected.encode("utf-8")):
        raise AuthenticationError("Invalid API token")
