import logging
from typing import Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from estate_portal.auth import security
from estate_portal.auth.schemas import Role
from estate_portal.core.exceptions import DuplicateEmail, InvalidCredentials
from estate_portal.lawyers.models import Lawyer
from estate_portal.lawyers.schemas import LawyerRegister

logger = logging.getLogger(__name__)


class LawyerService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_lawyer_by_email(self, email: str) -> Optional[Lawyer]:
        result = await self.db.execute(select(Lawyer).where(Lawyer.email == email))
        return result.scalars().first()

    def _issue_token(self, lawyer: Lawyer) -> str:
        return security.issue_token(lawyer.id, lawyer.email, Role.LAWYER, security.lawyer_token_ttl())

    async def register(self, register_data: LawyerRegister) -> Tuple[Lawyer, str]:
        if await self.get_lawyer_by_email(register_data.email):
            raise DuplicateEmail()

        lawyer = Lawyer(
            email=register_data.email,
            password_hash=security.get_password_hash(register_data.password),
            bar_number=register_data.bar_number,
            first_name=register_data.first_name,
            last_name=register_data.last_name,
        )
        self.db.add(lawyer)
        try:
            await self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            await self.db.rollback()
            raise DuplicateEmail()
        await self.db.refresh(lawyer)

        logger.info(f"Registered lawyer {lawyer.id}")
        return lawyer, self._issue_token(lawyer)

    async def authenticate(self, email: str, password: str) -> Tuple[Lawyer, str]:
        lawyer = await self.get_lawyer_by_email(email)
        if not lawyer or not security.verify_password(password, lawyer.password_hash):
            logger.info("Rejected lawyer login")
            raise InvalidCredentials()
        logger.info(f"Lawyer {lawyer.id} logged in")
        return lawyer, self._issue_token(lawyer)
