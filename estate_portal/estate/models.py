from sqlalchemy import Column, DateTime, ForeignKey, JSON, String, Text
from sqlalchemy.orm import relationship
from estate_portal.database import Base
from estate_portal.shared.models import AuditMixin


class EstateRecord(Base, AuditMixin):
    __tablename__ = "estate_data"

    client_id = Column(ForeignKey("clients.id"), unique=True, nullable=False)

    marital_status = Column(String, nullable=True)
    spouse_name = Column(String, nullable=True)
    # Free-form answers: plain text or lists of entries
    children = Column(JSON, nullable=True)
    assets = Column(JSON, nullable=True)
    beneficiaries = Column(JSON, nullable=True)
    healthcare_preferences = Column(Text, nullable=True)
    executor_preferences = Column(Text, nullable=True)
    special_instructions = Column(Text, nullable=True)
    completed_at = Column(DateTime, nullable=True)

    client = relationship("estate_portal.clients.models.Client", back_populates="estate_record")
