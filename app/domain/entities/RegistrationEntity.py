from datetime import datetime
import uuid
import enum
from sqlalchemy import Column, Integer, String, DateTime, Date, CHAR, Boolean, Text
from app.core.database import Base

class RegistrationStatus(str, enum.Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    APPROVED = "approved"
    REJECTED = "rejected"

class ResearchArea(str, enum.Enum):
    CELL_THERAPY = "Cell Therapy"
    RESPIRATORY = "Respiratory"
    ONCOLOGY = "Oncology"
    DIABETES = "Diabetes"
    OTHER = "Other"

class RegistrationEntity(Base):
    """General interest registration submitted from the public register page."""

    __tablename__ = "t_registrations"

    id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    full_name = Column(String(150), nullable=False)
    # the unique index is the authoritative guard against duplicate sign-ups
    email = Column(String(254), nullable=False, unique=True)
    phone = Column(String(50), nullable=False)
    age = Column(Integer, nullable=True)
    zip_code = Column(String(20), nullable=True)
    health_info = Column(Text, nullable=True)

    # legacy form fields
    date_of_birth = Column(Date, nullable=True)
    research_area = Column(String(50), nullable=True)
    medical_conditions = Column(Text, nullable=True)

    consent = Column(Boolean, nullable=False)
    status = Column(String(20), nullable=False, default=RegistrationStatus.PENDING.value, index=True)
    email_sent = Column(Boolean, nullable=False, default=False)
    create_datetime = Column(DateTime, default=datetime.now, index=True)
    update_datetime = Column(DateTime, default=datetime.now, onupdate=datetime.now)
