import uuid

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from estate_portal.clients.models import Client
from estate_portal.estate.models import EstateRecord
from estate_portal.estate.schemas import EstateDataFields
from estate_portal.estate.service import EstateService
from conftest import bearer, invite_client, login_client, register_lawyer


async def client_session(async_client: AsyncClient, email: str = "c@x.com", lawyer_email: str = "a@x.com") -> tuple[str, str]:
    lawyer = await register_lawyer(async_client, email=lawyer_email)
    invite = await invite_client(async_client, lawyer["token"], email=email)
    data = invite.json()
    return data["clientId"], await login_client(async_client, email, data["accessCode"])


@pytest.mark.asyncio
async def test_get_before_any_save_returns_empty_record(async_client: AsyncClient):
    _, token = await client_session(async_client)

    response = await async_client.get("/api/client/estate-data", headers=bearer(token))
    assert response.status_code == 200
    estate = response.json()["estateData"]
    assert estate["id"] is None
    assert estate["maritalStatus"] is None
    assert estate["completedAt"] is None


@pytest.mark.asyncio
async def test_saving_twice_updates_single_record(async_client: AsyncClient, db_session: AsyncSession):
    client_id, token = await client_session(async_client)

    first = await async_client.post("/api/client/estate-data", json={
        "maritalStatus": "married",
        "spouseName": "Pat",
        "children": [{"name": "Sam", "age": 7}],
        "assets": "House on Elm St",
    }, headers=bearer(token))
    assert first.status_code == 200
    assert first.json()["message"] == "Estate data saved successfully"

    client = await db_session.get(Client, uuid.UUID(client_id))
    assert client.profile_completed is True

    second = await async_client.post("/api/client/estate-data", json={
        "maritalStatus": "single",
        "executorPreferences": "My sister",
    }, headers=bearer(token))
    assert second.status_code == 200
    assert second.json()["message"] == "Estate data updated successfully"

    result = await db_session.execute(select(func.count()).select_from(EstateRecord))
    assert result.scalar_one() == 1

    response = await async_client.get("/api/client/estate-data", headers=bearer(token))
    estate = response.json()["estateData"]
    assert estate["clientId"] == client_id
    assert estate["maritalStatus"] == "single"
    assert estate["executorPreferences"] == "My sister"
    # Each save replaces the whole form
    assert estate["spouseName"] is None
    assert estate["children"] is None
    assert estate["completedAt"] is not None
    assert client.profile_completed is True


@pytest.mark.asyncio
async def test_empty_save_still_completes_profile(async_client: AsyncClient, db_session: AsyncSession):
    client_id, token = await client_session(async_client)

    response = await async_client.post("/api/client/estate-data", json={}, headers=bearer(token))
    assert response.status_code == 200

    client = await db_session.get(Client, uuid.UUID(client_id))
    assert client.profile_completed is True


@pytest.mark.asyncio
async def test_clients_only_see_their_own_record(async_client: AsyncClient):
    _, first_token = await client_session(async_client, email="c@x.com", lawyer_email="a@x.com")
    _, second_token = await client_session(async_client, email="d@x.com", lawyer_email="b@x.com")

    await async_client.post("/api/client/estate-data", json={"specialInstructions": "private"}, headers=bearer(first_token))

    response = await async_client.get("/api/client/estate-data", headers=bearer(second_token))
    assert response.json()["estateData"]["specialInstructions"] is None


@pytest.mark.asyncio
async def test_unknown_fields_are_ignored(async_client: AsyncClient):
    client_id, token = await client_session(async_client)

    response = await async_client.post("/api/client/estate-data", json={
        "maritalStatus": "widowed",
        "clientId": str(uuid.uuid4()),
        "favouriteColour": "green",
    }, headers=bearer(token))
    assert response.status_code == 200

    estate = (await async_client.get("/api/client/estate-data", headers=bearer(token))).json()["estateData"]
    assert estate["clientId"] == client_id
    assert estate["maritalStatus"] == "widowed"


@pytest.mark.asyncio
async def test_concurrent_first_save_falls_back_to_update(async_client: AsyncClient, db_session: AsyncSession, monkeypatch):
    client_id, _ = await client_session(async_client)
    client_id = uuid.UUID(client_id)
    service = EstateService(db_session)
    record, created = await service.save(client_id, EstateDataFields(marital_status="single"))
    assert created is True

    # Simulate a second request that found no record before the first one committed
    async def no_existing_record(client_id):
        return None

    monkeypatch.setattr(service, "get", no_existing_record)

    updated, created = await service.save(client_id, EstateDataFields(marital_status="married", spouse_name="Pat"))
    assert created is False
    assert updated.id == record.id
    assert updated.marital_status == "married"
    assert updated.spouse_name == "Pat"

    result = await db_session.execute(select(func.count()).select_from(EstateRecord))
    assert result.scalar_one() == 1
    client = await db_session.get(Client, client_id)
    assert client.profile_completed is True
