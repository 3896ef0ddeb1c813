from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from estate_portal.auth.dependencies import require_lawyer
from estate_portal.auth.schemas import TokenClaims
from estate_portal.dashboard.schemas import DashboardResponse
from estate_portal.dashboard.service import DashboardService
from estate_portal.database import get_db
from estate_portal.invitations.schemas import InvitationResponse, InviteClientRequest
from estate_portal.invitations.service import InvitationService
from estate_portal.lawyers import schemas
from estate_portal.lawyers.service import LawyerService
from estate_portal.notifications.email import EmailNotifier, get_notifier

router = APIRouter(prefix="/lawyer", tags=["lawyer"])


@router.post("/register", response_model=schemas.LawyerAuthResponse)
async def register(
    register_data: schemas.LawyerRegister,
    db: AsyncSession = Depends(get_db),
):
    lawyer, token = await LawyerService(db).register(register_data)
    return {"message": "Lawyer registered successfully", "token": token, "lawyer": lawyer}


@router.post("/login", response_model=schemas.LawyerAuthResponse)
async def login(
    login_data: schemas.LawyerLogin,
    db: AsyncSession = Depends(get_db),
):
    lawyer, token = await LawyerService(db).authenticate(login_data.email, login_data.password)
    return {"message": "Login successful", "token": token, "lawyer": lawyer}


@router.post("/invite-client", response_model=InvitationResponse)
async def invite_client(
    invite_data: InviteClientRequest,
    claims: TokenClaims = Depends(require_lawyer),
    db: AsyncSession = Depends(get_db),
    notifier: EmailNotifier = Depends(get_notifier),
):
    """Create a client record and email them their portal access code."""
    client = await InvitationService(db, notifier).invite(
        lawyer_id=claims.sub,
        client_name=invite_data.client_name,
        client_email=invite_data.client_email,
    )
    return {
        "message": "Client invitation sent successfully",
        "client_id": client.id,
        "access_code": client.access_code,
    }


@router.post("/clients/{client_id}/resend-invitation", response_model=InvitationResponse)
async def resend_invitation(
    client_id: UUID,
    claims: TokenClaims = Depends(require_lawyer),
    db: AsyncSession = Depends(get_db),
    notifier: EmailNotifier = Depends(get_notifier),
):
    client = await InvitationService(db, notifier).resend(lawyer_id=claims.sub, client_id=client_id)
    return {
        "message": "Client invitation resent successfully",
        "client_id": client.id,
        "access_code": client.access_code,
    }


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    claims: TokenClaims = Depends(require_lawyer),
    db: AsyncSession = Depends(get_db),
):
    return await DashboardService(db).dashboard(claims.sub)
