# Import every model so relationships resolve and Base.metadata is complete
from estate_portal.lawyers.models import Lawyer
from estate_portal.clients.models import Client
from estate_portal.estate.models import EstateRecord
from estate_portal.invitations.models import InvitationLog

__all__ = ["Lawyer", "Client", "EstateRecord", "InvitationLog"]
