from datetime import datetime
from typing import List, Optional
from uuid import UUID
from estate_portal.auth.schemas import CamelModel


class DashboardClient(CamelModel):
    id: UUID
    email: str
    access_code: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    invitation_sent_at: Optional[datetime] = None
    profile_completed: bool = False
    created_at: datetime
    estate_completed_at: Optional[datetime] = None


class InvitationStatistics(CamelModel):
    total_invitations: int = 0
    downloads: int = 0


class DashboardResponse(CamelModel):
    clients: List[DashboardClient]
    statistics: InvitationStatistics
