"""Request authentication helpers."""

from fastapi import Header


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Extract the access token from an ``Authorization: Bearer`` header.

    Returns None when the header is missing or uses another scheme; routes
    decide whether that is an error.
    """
    if not authorization:
        return None

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        return None
    return token
