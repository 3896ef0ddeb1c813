from uuid import UUID

from sqlalchemy import case, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from estate_portal.clients.models import Client
from estate_portal.dashboard.schemas import DashboardClient, DashboardResponse, InvitationStatistics
from estate_portal.estate.models import EstateRecord
from estate_portal.invitations.models import InvitationLog


class DashboardService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_clients(self, lawyer_id: UUID) -> list[DashboardClient]:
        stmt = (
            select(Client, EstateRecord.completed_at)
            .outerjoin(EstateRecord, EstateRecord.client_id == Client.id)
            .where(Client.assigned_lawyer_id == lawyer_id)
            .order_by(desc(Client.created_at))
        )
        result = await self.db.execute(stmt)
        return [
            DashboardClient.model_validate(client).model_copy(update={"estate_completed_at": completed_at})
            for client, completed_at in result.all()
        ]

    async def invitation_statistics(self, lawyer_id: UUID) -> InvitationStatistics:
        stmt = select(
            func.count(InvitationLog.id),
            func.coalesce(func.sum(case((InvitationLog.app_downloaded.is_(True), 1), else_=0)), 0),
        ).where(InvitationLog.sent_by_lawyer_id == lawyer_id)
        result = await self.db.execute(stmt)
        total, downloads = result.one()
        return InvitationStatistics(total_invitations=total or 0, downloads=downloads or 0)

    async def dashboard(self, lawyer_id: UUID) -> DashboardResponse:
        return DashboardResponse(
            clients=await self.list_clients(lawyer_id),
            statistics=await self.invitation_statistics(lawyer_id),
        )
