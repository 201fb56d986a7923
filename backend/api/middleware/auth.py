"""
JWT Authentication middleware.

Validates bearer tokens issued by the auth module and extracts their claims.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from pydantic import ValidationError as PydanticValidationError

from shared.config import get_settings
from shared.models import TokenClaims
from modules.auth.service import SIGNING_ALGORITHM
from modules.auth.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    TokenConfigurationError,
)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def decode_token(token: str) -> TokenClaims:
    """
    Decode and validate a bearer token.

    Only HS256 is accepted; a token signed with any other algorithm is
    invalid even if the signature would verify.

    Args:
        token: The JWT token string

    Returns:
        TokenClaims with the embedded identity

    Raises:
        TokenConfigurationError: If no signing secret is configured
        ExpiredTokenError: If the token is past its expiry
        InvalidTokenError: If the token is malformed, tampered or
            carries an unexpected payload
    """
    settings = get_settings()

    if not settings.jwt_secret:
        raise TokenConfigurationError()

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[SIGNING_ALGORITHM],
        )
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError()
    except JWTError as e:
        raise InvalidTokenError(f"Invalid token: {str(e)}")

    try:
        claims = TokenClaims(**payload)
    except PydanticValidationError:
        raise InvalidTokenError("Invalid token: unexpected claims")

    if claims.sub != claims.user.email:
        raise InvalidTokenError("Invalid token: subject does not match identity")
    return claims


async def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenClaims:
    """
    Dependency that requires a valid bearer token.

    Usage:
        @router.post("/refresh")
        async def refresh(claims: TokenClaims = Depends(get_current_claims)):
            return {"email": claims.sub}
    """
    if credentials is None:
        raise MissingTokenError()

    return decode_token(credentials.credentials)


# Type alias for cleaner route definitions
RequireAuth = Depends(get_current_claims)
