from fastapi import APIRouter, Depends

from estate_portal.auth.dependencies import get_current_claims
from estate_portal.auth.schemas import TokenClaims, VerifyTokenResponse

router = APIRouter(tags=["auth"])


@router.get("/verify-token", response_model=VerifyTokenResponse)
async def verify_token(claims: TokenClaims = Depends(get_current_claims)):
    """Confirm a stored token is still valid and report who it belongs to."""
    return {"valid": True, "user": {"id": claims.sub, "email": claims.email, "role": claims.role}}
