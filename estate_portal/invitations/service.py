import logging
import secrets
from typing import Optional, Tuple
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from estate_portal.clients.models import Client
from estate_portal.core.exceptions import ClientExists, NotFound, NotificationFailed
from estate_portal.invitations.emails import build_invitation_email
from estate_portal.invitations.models import InvitationLog
from estate_portal.notifications.email import EmailDeliveryError, EmailNotifier, build_notifier
from estate_portal.shared.models import utcnow

logger = logging.getLogger(__name__)

ACCESS_CODE_LENGTH = 8


def generate_access_code() -> str:
    return secrets.token_hex(ACCESS_CODE_LENGTH // 2).upper()


def generate_invitation_code() -> str:
    return secrets.token_urlsafe(32)


def split_name(full_name: str) -> Tuple[str, Optional[str]]:
    first, _, last = full_name.strip().partition(" ")
    return first, (last.strip() or None)


class InvitationService:
    def __init__(self, db: AsyncSession, notifier: Optional[EmailNotifier] = None):
        self.db = db
        self.notifier = notifier or build_notifier()

    async def _get_client_by_email(self, email: str) -> Optional[Client]:
        result = await self.db.execute(select(Client).where(Client.email == email))
        return result.scalars().first()

    async def _get_log_by_code(self, code: str) -> InvitationLog:
        result = await self.db.execute(select(InvitationLog).where(InvitationLog.invitation_code == code))
        log = result.scalars().first()
        if not log:
            raise NotFound("Invitation not found")
        return log

    async def _send(self, client: Client, client_name: str, invitation_code: str) -> None:
        email = build_invitation_email(client_name, client.email, client.access_code, invitation_code)
        try:
            await self.notifier.send(email)
        except EmailDeliveryError as e:
            # The client row is already committed; the lawyer can resend
            logger.error(f"Invitation email to client {client.id} failed: {e}")
            raise NotificationFailed(clientId=str(client.id))

    async def invite(self, lawyer_id: UUID, client_name: str, client_email: str) -> Client:
        """Create a client for ``lawyer_id`` and email them their access code.

        The client row and its invitation log entry are committed together
        before the email goes out. If delivery fails, ``NotificationFailed``
        is raised but the client stays persisted.
        """
        if await self._get_client_by_email(client_email):
            raise ClientExists()

        first_name, last_name = split_name(client_name)
        invitation_code = generate_invitation_code()
        now = utcnow()

        client = Client(
            email=client_email,
            access_code=generate_access_code(),
            first_name=first_name,
            last_name=last_name,
            invitation_sent_at=now,
            profile_completed=False,
            assigned_lawyer_id=lawyer_id,
        )
        self.db.add(client)
        self.db.add(InvitationLog(
            client_email=client_email,
            invitation_code=invitation_code,
            sent_by_lawyer_id=lawyer_id,
            sent_at=now,
        ))
        try:
            await self.db.commit()
        except IntegrityError:
            # The unique constraint on clients.email is the authoritative check
            await self.db.rollback()
            raise ClientExists()
        await self.db.refresh(client)
        logger.info(f"Lawyer {lawyer_id} invited client {client.id}")

        await self._send(client, client_name, invitation_code)
        return client

    async def resend(self, lawyer_id: UUID, client_id: UUID) -> Client:
        result = await self.db.execute(
            select(Client).where(Client.id == client_id, Client.assigned_lawyer_id == lawyer_id)
        )
        client = result.scalars().first()
        if not client:
            raise NotFound("Client not found")

        invitation_code = generate_invitation_code()
        now = utcnow()
        client.invitation_sent_at = now
        self.db.add(InvitationLog(
            client_email=client.email,
            invitation_code=invitation_code,
            sent_by_lawyer_id=lawyer_id,
            sent_at=now,
        ))
        await self.db.commit()
        await self.db.refresh(client)
        logger.info(f"Lawyer {lawyer_id} resent invitation to client {client.id}")

        client_name = " ".join(part for part in (client.first_name, client.last_name) if part)
        await self._send(client, client_name or client.email, invitation_code)
        return client

    async def mark_opened(self, code: str) -> InvitationLog:
        log = await self._get_log_by_code(code)
        if log.opened_at is None:
            log.opened_at = utcnow()
            await self.db.commit()
            await self.db.refresh(log)
        return log

    async def mark_app_downloaded(self, code: str) -> InvitationLog:
        log = await self._get_log_by_code(code)
        if not log.app_downloaded:
            log.app_downloaded = True
            await self.db.commit()
            await self.db.refresh(log)
        return log
