from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship
from estate_portal.database import Base
from estate_portal.shared.models import UUIDMixin, utcnow


class InvitationLog(Base, UUIDMixin):
    """Audit trail of invitation emails. Rows are only ever appended, apart
    from the open/download tracking flags."""
    __tablename__ = "email_invitations"

    client_email = Column(String, index=True, nullable=False)
    invitation_code = Column(String, unique=True, index=True, nullable=False)
    sent_by_lawyer_id = Column(ForeignKey("lawyers.id"), nullable=True, index=True)
    sent_at = Column(DateTime, default=utcnow, nullable=False)
    opened_at = Column(DateTime, nullable=True)
    app_downloaded = Column(Boolean, default=False, nullable=False)

    sent_by_lawyer = relationship("estate_portal.lawyers.models.Lawyer", back_populates="invitations")
