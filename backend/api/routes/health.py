"""
Health check endpoints.

Provides endpoints for monitoring application health and a bearer-gated
probe clients use to check that their token is accepted.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import get_settings
from shared.models import TokenClaims
from ..middleware.auth import get_current_claims

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ProtectedResponse(BaseModel):
    """Response of the token probe."""

    data: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/protected", response_model=ProtectedResponse)
async def protected(
    claims: TokenClaims = Depends(get_current_claims),
) -> ProtectedResponse:
    """
    Token probe.

    Returns 200 only with a valid bearer token.
    """
    return ProtectedResponse(data="rosebud")
