"""
Authentication API endpoints.

Exchanges credentials for a bearer token and refreshes tokens.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_claims
from api.dependencies import get_auth_service
from shared.models import TokenClaims

from .interfaces import IAuthService
from .models import AuthTokenResponse, LoginRequest

router = APIRouter()


@router.post("/login", response_model=AuthTokenResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthTokenResponse:
    """
    Log in with email and password.

    The user's last-login time is recorded in the background; a failure
    there does not affect the response.
    """
    token = await service.login(request.email, request.password)
    return AuthTokenResponse(authToken=token)


@router.post("/refresh", response_model=AuthTokenResponse)
async def refresh(
    claims: TokenClaims = Depends(get_current_claims),
    service: IAuthService = Depends(get_auth_service),
) -> AuthTokenResponse:
    """
    Exchange a valid bearer token for a new one with a later expiry.
    """
    return AuthTokenResponse(authToken=service.refresh(claims))
