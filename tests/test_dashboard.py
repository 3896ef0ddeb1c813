import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from estate_portal.invitations.models import InvitationLog
from conftest import bearer, invite_client, login_client, register_lawyer


@pytest.mark.asyncio
async def test_dashboard_only_lists_own_clients(async_client: AsyncClient):
    lawyer_a = await register_lawyer(async_client, email="a@x.com")
    lawyer_b = await register_lawyer(async_client, email="b@x.com")
    await invite_client(async_client, lawyer_a["token"], email="c@x.com", name="Client C")
    await invite_client(async_client, lawyer_b["token"], email="d@x.com", name="Client D")
    await invite_client(async_client, lawyer_b["token"], email="e@x.com", name="Client E")

    response = await async_client.get("/api/lawyer/dashboard", headers=bearer(lawyer_a["token"]))
    assert response.status_code == 200
    data = response.json()
    assert [c["email"] for c in data["clients"]] == ["c@x.com"]
    assert data["statistics"] == {"totalInvitations": 1, "downloads": 0}

    response = await async_client.get("/api/lawyer/dashboard", headers=bearer(lawyer_b["token"]))
    data = response.json()
    # Newest first
    assert [c["email"] for c in data["clients"]] == ["e@x.com", "d@x.com"]
    assert data["statistics"]["totalInvitations"] == 2


@pytest.mark.asyncio
async def test_dashboard_joins_estate_completion(async_client: AsyncClient):
    lawyer = await register_lawyer(async_client)
    done = (await invite_client(async_client, lawyer["token"], email="c@x.com")).json()
    await invite_client(async_client, lawyer["token"], email="d@x.com")

    token = await login_client(async_client, "c@x.com", done["accessCode"])
    await async_client.post("/api/client/estate-data", json={"maritalStatus": "single"}, headers=bearer(token))

    data = (await async_client.get("/api/lawyer/dashboard", headers=bearer(lawyer["token"]))).json()
    by_email = {c["email"]: c for c in data["clients"]}
    assert by_email["c@x.com"]["estateCompletedAt"] is not None
    assert by_email["c@x.com"]["profileCompleted"] is True
    assert by_email["d@x.com"]["estateCompletedAt"] is None
    assert by_email["d@x.com"]["profileCompleted"] is False


@pytest.mark.asyncio
async def test_dashboard_counts_app_downloads(async_client: AsyncClient, db_session: AsyncSession):
    lawyer = await register_lawyer(async_client)
    await invite_client(async_client, lawyer["token"], email="c@x.com")
    await invite_client(async_client, lawyer["token"], email="d@x.com")

    log = (await db_session.execute(
        select(InvitationLog).where(InvitationLog.client_email == "c@x.com")
    )).scalars().one()
    await async_client.post(f"/api/invitations/{log.invitation_code}/app-downloaded")

    data = (await async_client.get("/api/lawyer/dashboard", headers=bearer(lawyer["token"]))).json()
    assert data["statistics"] == {"totalInvitations": 2, "downloads": 1}


@pytest.mark.asyncio
async def test_empty_dashboard(async_client: AsyncClient):
    lawyer = await register_lawyer(async_client)

    data = (await async_client.get("/api/lawyer/dashboard", headers=bearer(lawyer["token"]))).json()
    assert data == {"clients": [], "statistics": {"totalInvitations": 0, "downloads": 0}}
