"""Verification of access tokens issued by the identity provider."""

from uuid import UUID

import jwt
import structlog
from jwt import InvalidTokenError

from cardforge.config import get_settings

logger = structlog.get_logger(__name__)

ALGORITHM = "HS256"


def verify_access_token(token: str) -> UUID | None:
    """Verify an access token and return the owner id (`sub`) if valid."""
    settings = get_settings()
    if not settings.SECRET_KEY:
        logger.error("access_token_secret_missing")
        return None

    options = {"require": ["sub", "exp"]}
    try:
        if settings.JWT_AUDIENCE:
            payload = jwt.decode(
                token,
                settings.SECRET_KEY,
                algorithms=[ALGORITHM],
                audience=settings.JWT_AUDIENCE,
                options=options,
            )
        else:
            payload = jwt.decode(
                token,
                settings.SECRET_KEY,
                algorithms=[ALGORITHM],
                options={**options, "verify_aud": False},
            )
        # Refresh tokens are only valid at the identity provider
        if payload.get("type") == "refresh":
            return None
        return UUID(str(payload["sub"]))
    except (InvalidTokenError, ValueError):
        return None
