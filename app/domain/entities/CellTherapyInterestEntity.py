from datetime import datetime
import uuid
import enum
from sqlalchemy import Column, Integer, String, DateTime, CHAR, Boolean, Text
from app.core.database import Base

CELL_THERAPY_FORM_TYPE = "Cell Therapy Interest"

class CellTherapyStatus(str, enum.Enum):
    PENDING = "pending"
    CONTACTED = "contacted"
    ELIGIBLE = "eligible"
    NOT_ELIGIBLE = "not_eligible"
    ENROLLED = "enrolled"
    WITHDRAWN = "withdrawn"

class CellTherapyInterestEntity(Base):

    __tablename__ = "t_cell_therapy_interests"

    id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    full_name = Column(String(150), nullable=False)
    email = Column(String(254), nullable=False, index=True)
    mobile_number = Column(String(10), nullable=False)
    zip_code = Column(String(5), nullable=False)
    age = Column(Integer, nullable=False)
    current_diagnosis = Column(Text, nullable=False)
    current_health_status = Column(Text, nullable=False)
    # soft reference to a ClinicalTrials.gov record, never checked
    trial_nct_id = Column(String(20), nullable=True, index=True)
    trial_title = Column(String(500), nullable=True)
    form_type = Column(String(50), nullable=False, default=CELL_THERAPY_FORM_TYPE)
    status = Column(String(20), nullable=False, default=CellTherapyStatus.PENDING.value, index=True)
    notes = Column(Text, nullable=True)
    email_sent = Column(Boolean, nullable=False, default=False)
    create_datetime = Column(DateTime, default=datetime.now, index=True)
    update_datetime = Column(DateTime, default=datetime.now, onupdate=datetime.now)
