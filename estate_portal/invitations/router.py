from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from estate_portal.database import get_db
from estate_portal.invitations.schemas import MessageResponse
from estate_portal.invitations.service import InvitationService

router = APIRouter(prefix="/invitations", tags=["invitations"])


# Public: the invitation code from the emailed portal link is the credential
@router.post("/{code}/opened", response_model=MessageResponse)
async def invitation_opened(
    code: str,
    db: AsyncSession = Depends(get_db),
):
    await InvitationService(db).mark_opened(code)
    return {"message": "Invitation marked as opened"}


@router.post("/{code}/app-downloaded", response_model=MessageResponse)
async def invitation_app_downloaded(
    code: str,
    db: AsyncSession = Depends(get_db),
):
    await InvitationService(db).mark_app_downloaded(code)
    return {"message": "App download recorded"}
