import asyncio

from sqlalchemy import select

from estate_portal.database import AsyncSessionLocal
from estate_portal.auth.security import get_password_hash
from estate_portal.models import Lawyer

EMAIL = "demo@legalestatepro.com"
PASSWORD = "password123"

async def create_test_lawyer():
    async with AsyncSessionLocal() as session:
        result = await session.execute(select(Lawyer).where(Lawyer.email == EMAIL))
        lawyer = result.scalars().first()
        if not lawyer:
            lawyer = Lawyer(
                email=EMAIL,
                password_hash=get_password_hash(PASSWORD),
                first_name="Demo",
                last_name="Lawyer",
                bar_number="DEMO-0001",
            )
            session.add(lawyer)
            print(f"Created Lawyer: {lawyer.email}")
        else:
            # Reset password just in case
            lawyer.password_hash = get_password_hash(PASSWORD)
            print(f"Updated Lawyer password: {lawyer.email}")

        await session.commit()
        print("Done!")

if __name__ == "__main__":
    asyncio.run(create_test_lawyer())
