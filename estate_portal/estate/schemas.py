from datetime import datetime
from typing import Any, Optional
from uuid import UUID
from pydantic import ConfigDict
from estate_portal.auth.schemas import CamelModel


class EstateDataFields(CamelModel):
    """The estate-planning form. Every answer is optional and free-form."""
    model_config = ConfigDict(extra="ignore")

    marital_status: Optional[str] = None
    spouse_name: Optional[str] = None
    children: Optional[Any] = None
    assets: Optional[Any] = None
    beneficiaries: Optional[Any] = None
    healthcare_preferences: Optional[str] = None
    executor_preferences: Optional[str] = None
    special_instructions: Optional[str] = None


class EstateDataResponse(EstateDataFields):
    id: Optional[UUID] = None
    client_id: Optional[UUID] = None
    completed_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EstateDataEnvelope(CamelModel):
    estate_data: EstateDataResponse
