from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from estate_portal.auth import security
from estate_portal.auth.schemas import Role, TokenClaims
from estate_portal.core.exceptions import Forbidden, Unauthorized

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_claims(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenClaims:
    if credentials is None or not credentials.credentials:
        raise Unauthorized()

    claims = security.verify_token(credentials.credentials)
    request.state.claims = claims
    return claims


class RequireRole:
    """FastAPI dependency that checks the token carries a specific role."""

    def __init__(self, role: Role):
        self.role = role

    async def __call__(self, claims: TokenClaims = Depends(get_current_claims)) -> TokenClaims:
        if claims.role != self.role:
            raise Forbidden(f"{self.role.value.capitalize()} access required")
        return claims


require_lawyer = RequireRole(Role.LAWYER)
require_client = RequireRole(Role.CLIENT)
