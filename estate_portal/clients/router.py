from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from estate_portal.auth.dependencies import require_client
from estate_portal.auth.schemas import TokenClaims
from estate_portal.clients import schemas
from estate_portal.clients.service import ClientService
from estate_portal.database import get_db
from estate_portal.estate.schemas import EstateDataEnvelope, EstateDataFields, EstateDataResponse
from estate_portal.estate.service import EstateService
from estate_portal.invitations.schemas import MessageResponse

router = APIRouter(prefix="/client", tags=["client"])


@router.post("/login", response_model=schemas.ClientAuthResponse)
async def login(
    login_data: schemas.ClientLogin,
    db: AsyncSession = Depends(get_db),
):
    client, token = await ClientService(db).authenticate(login_data.email, login_data.access_code)
    return {"message": "Client login successful", "token": token, "client": client}


# The client id always comes from the verified token, never from the request
@router.get("/estate-data", response_model=EstateDataEnvelope)
async def get_estate_data(
    claims: TokenClaims = Depends(require_client),
    db: AsyncSession = Depends(get_db),
):
    record = await EstateService(db).get(claims.sub)
    if record is None:
        return {"estate_data": EstateDataResponse()}
    return {"estate_data": EstateDataResponse.model_validate(record)}


@router.post("/estate-data", response_model=MessageResponse)
async def save_estate_data(
    estate_data: EstateDataFields,
    claims: TokenClaims = Depends(require_client),
    db: AsyncSession = Depends(get_db),
):
    _, created = await EstateService(db).save(claims.sub, estate_data)
    if created:
        return {"message": "Estate data saved successfully"}
    return {"message": "Estate data updated successfully"}
