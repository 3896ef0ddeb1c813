import logging
from typing import Optional, Tuple
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from estate_portal.clients.models import Client
from estate_portal.estate.models import EstateRecord
from estate_portal.estate.schemas import EstateDataFields
from estate_portal.shared.models import utcnow

logger = logging.getLogger(__name__)


class EstateService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, client_id: UUID) -> Optional[EstateRecord]:
        return await self._get_record(client_id)

    async def _get_record(self, client_id: UUID) -> Optional[EstateRecord]:
        result = await self.db.execute(select(EstateRecord).where(EstateRecord.client_id == client_id))
        return result.scalars().first()

    def _apply(self, record: EstateRecord, values: dict, now) -> None:
        for field, value in values.items():
            setattr(record, field, value)
        record.completed_at = now
        record.updated_at = now

    async def _mark_profile_completed(self, client_id: UUID) -> None:
        await self.db.execute(
            update(Client).where(Client.id == client_id).values(profile_completed=True)
        )

    async def save(self, client_id: UUID, fields: EstateDataFields) -> Tuple[EstateRecord, bool]:
        """Upsert the client's estate record. Returns the record and whether it was created.

        Any save counts as completing the profile, regardless of which
        answers were filled in.
        """
        values = fields.model_dump()
        now = utcnow()

        record = await self.get(client_id)
        created = record is None
        if created:
            record = EstateRecord(client_id=client_id, completed_at=now, **values)
            self.db.add(record)
        else:
            self._apply(record, values, now)

        await self._mark_profile_completed(client_id)
        try:
            await self.db.commit()
        except IntegrityError:
            # A concurrent first save inserted the record; update that one
            await self.db.rollback()
            record = await self._get_record(client_id)
            if record is None:
                raise
            created = False
            self._apply(record, values, now)
            await self._mark_profile_completed(client_id)
            await self.db.commit()
        await self.db.refresh(record)

        logger.info(f"Estate data {'saved' if created else 'updated'} for client {client_id}")
        return record, created
