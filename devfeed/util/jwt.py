"""JWT token utilities.

Access tokens are issued by the hosted auth provider. This service only
verifies them; it never signs tokens of its own.
"""

from datetime import datetime
from typing import Optional

import jwt
from pydantic import BaseModel

from devfeed.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims we rely on from a provider access token."""

    sub: str
    exp: datetime
    aud: Optional[str | list[str]] = None
    email: Optional[str] = None
    role: Optional[str] = None


class JWTError(Exception):
    """JWT-related error."""

    pass


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode an access token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired or issued for another audience
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"require": ["exp", "sub"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidAudienceError:
        raise JWTError("Token audience is invalid")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
