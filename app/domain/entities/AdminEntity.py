from datetime import datetime
import uuid
import enum
from sqlalchemy import Column, String, DateTime, CHAR
from app.core.database import Base

class Role(enum.Enum):
    ADMIN = "ROLE_ADMIN"

class AdminEntity(Base):

    __tablename__ = "m_admins"

    id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(150), nullable=False, unique=True)
    email = Column(String(254), nullable=False, unique=True)
    password = Column(String(128), nullable=False)
    last_login = Column(DateTime, nullable=True)
    create_datetime = Column(DateTime, default=datetime.now)
    update_datetime = Column(DateTime, default=datetime.now, onupdate=datetime.now)
