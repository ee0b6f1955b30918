"""Verification of bearer tokens issued by the hosted auth provider.

Tokens are HS256, signed with the project's JWT secret, carry the user id in
"sub" and the audience "authenticated". This service never issues tokens.
"""

from typing import Any

from jose import JWTError, jwt

from config.settings import settings
from src.cm_common.errors import InvalidCredentialsError


def decode_token(token: str) -> dict[str, Any]:
    """Decode and validate a JWT access token.

    Raises:
        InvalidCredentialsError: signature, expiry, audience or sub is invalid.
    """
    try:
        payload: dict[str, Any] = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],  # Explicit list prevents algorithm confusion
            audience=settings.JWT_AUDIENCE,
        )
    except JWTError:
        raise InvalidCredentialsError() from None

    if not payload.get("sub"):
        raise InvalidCredentialsError()
    return payload
