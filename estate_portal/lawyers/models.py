from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from estate_portal.database import Base
from estate_portal.shared.models import AuditMixin


class Lawyer(Base, AuditMixin):
    __tablename__ = "lawyers"

    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    bar_number = Column(String, nullable=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)

    # Forward references, resolved once every model module is imported
    clients = relationship("estate_portal.clients.models.Client", back_populates="assigned_lawyer")
    invitations = relationship("estate_portal.invitations.models.InvitationLog", back_populates="sent_by_lawyer")
