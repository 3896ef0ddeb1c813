from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship
from estate_portal.database import Base
from estate_portal.shared.models import AuditMixin


class Client(Base, AuditMixin):
    """Estate-planning client, created when a lawyer sends an invitation."""
    __tablename__ = "clients"

    email = Column(String, unique=True, index=True, nullable=False)
    access_code = Column(String, nullable=False)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    invitation_sent_at = Column(DateTime, nullable=True)
    profile_completed = Column(Boolean, default=False, nullable=False)

    # Set once at invitation time, never reassigned
    assigned_lawyer_id = Column(ForeignKey("lawyers.id"), nullable=True, index=True)

    assigned_lawyer = relationship("estate_portal.lawyers.models.Lawyer", back_populates="clients")
    estate_record = relationship("estate_portal.estate.models.EstateRecord", back_populates="client", uselist=False)
