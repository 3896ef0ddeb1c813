from typing import Optional
from uuid import UUID
from estate_portal.auth.schemas import CamelModel
from estate_portal.shared.schemas import NonEmptyStr, NormalizedEmail


class ClientLogin(CamelModel):
    email: NormalizedEmail
    access_code: NonEmptyStr


class ClientResponse(CamelModel):
    id: UUID
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_completed: bool = False


class ClientAuthResponse(CamelModel):
    message: str
    token: str
    client: ClientResponse
