import pytest
from httpx import AsyncClient

from conftest import RecordingNotifier, bearer


@pytest.mark.asyncio
async def test_lawyer_invites_client_who_completes_estate_form(async_client: AsyncClient, notifier: RecordingNotifier):
    # 1. Lawyer registers and logs in
    register = await async_client.post("/api/lawyer/register", json={
        "email": "a@x.com",
        "password": "password123",
        "firstName": "Jane",
        "lastName": "Doe",
    })
    assert register.status_code == 200

    login = await async_client.post("/api/lawyer/login", json={"email": "a@x.com", "password": "password123"})
    assert login.status_code == 200
    lawyer_headers = bearer(login.json()["token"])

    # 2. Invite a client
    invite = await async_client.post("/api/lawyer/invite-client", json={
        "clientEmail": "c@x.com",
        "clientName": "Client C",
    }, headers=lawyer_headers)
    assert invite.status_code == 200
    access_code = invite.json()["accessCode"]
    assert len(access_code) == 8
    assert access_code in notifier.sent[0].html

    # 3. Client logs in with the emailed code and fills in the form
    client_login = await async_client.post("/api/client/login", json={"email": "c@x.com", "accessCode": access_code})
    assert client_login.status_code == 200
    client_headers = bearer(client_login.json()["token"])

    save = await async_client.post("/api/client/estate-data", json={"maritalStatus": "single"}, headers=client_headers)
    assert save.status_code == 200

    # 4. The lawyer sees the completed profile
    dashboard = await async_client.get("/api/lawyer/dashboard", headers=lawyer_headers)
    assert dashboard.status_code == 200
    clients = dashboard.json()["clients"]
    assert len(clients) == 1
    assert clients[0]["email"] == "c@x.com"
    assert clients[0]["firstName"] == "Client"
    assert clients[0]["estateCompletedAt"] is not None
    assert dashboard.json()["statistics"]["totalInvitations"] == 1
