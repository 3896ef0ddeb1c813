import logging
from typing import Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from estate_portal.auth import security
from estate_portal.auth.schemas import Role
from estate_portal.clients.models import Client
from estate_portal.core.exceptions import InvalidCredentials

logger = logging.getLogger(__name__)


class ClientService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_client_by_email(self, email: str) -> Optional[Client]:
        result = await self.db.execute(select(Client).where(Client.email == email))
        return result.scalars().first()

    async def authenticate(self, email: str, access_code: str) -> Tuple[Client, str]:
        """Log a client in with the access code from their invitation email."""
        result = await self.db.execute(
            select(Client).where(Client.email == email, Client.access_code == access_code)
        )
        client = result.scalars().first()
        if not client:
            logger.info("Rejected client login")
            raise InvalidCredentials("Invalid email or access code")

        logger.info(f"Client {client.id} logged in")
        token = security.issue_token(client.id, client.email, Role.CLIENT, security.client_token_ttl())
        return client, token
