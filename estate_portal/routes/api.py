import estate_portal.models  # noqa: F401  (registers every mapper)

from fastapi import APIRouter

from estate_portal.auth.router import router as auth_router
from estate_portal.lawyers.router import router as lawyer_router
from estate_portal.clients.router import router as client_router
from estate_portal.invitations.router import router as invitations_router

api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(lawyer_router)
api_router.include_router(client_router)
api_router.include_router(invitations_router)
