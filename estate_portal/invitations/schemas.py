from uuid import UUID
from estate_portal.auth.schemas import CamelModel
from estate_portal.shared.schemas import NonEmptyStr, NormalizedEmail


class InviteClientRequest(CamelModel):
    client_name: NonEmptyStr
    client_email: NormalizedEmail


class InvitationResponse(CamelModel):
    message: str
    client_id: UUID
    access_code: str


class MessageResponse(CamelModel):
    message: str
