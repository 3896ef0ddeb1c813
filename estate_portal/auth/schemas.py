from datetime import datetime
from enum import Enum
from uuid import UUID
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Role(str, Enum):
    LAWYER = "lawyer"
    CLIENT = "client"


class TokenClaims(BaseModel):
    sub: UUID
    email: str
    role: Role
    exp: datetime


class CamelModel(BaseModel):
    """Base for request/response bodies: camelCase on the wire, snake_case in code."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class TokenUser(CamelModel):
    id: UUID
    email: str
    role: Role


class VerifyTokenResponse(CamelModel):
    valid: bool = True
    user: TokenUser
