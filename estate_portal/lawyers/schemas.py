from typing import Optional
from uuid import UUID
from pydantic import Field
from estate_portal.auth.schemas import CamelModel
from estate_portal.shared.schemas import NonEmptyStr, NormalizedEmail


class LawyerRegister(CamelModel):
    email: NormalizedEmail
    password: str = Field(min_length=8)
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    bar_number: Optional[str] = None


class LawyerLogin(CamelModel):
    email: NormalizedEmail
    password: str = Field(min_length=1)


class LawyerResponse(CamelModel):
    id: UUID
    email: str
    first_name: str
    last_name: str
    bar_number: Optional[str] = None


class LawyerAuthResponse(CamelModel):
    message: str
    token: str
    lawyer: LawyerResponse
