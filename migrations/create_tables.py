import sys
import os

# Add the project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.database import engine, Base

# ⚠️ Import the entities so SQLAlchemy registers their tables
from app.domain.entities.AdminEntity import AdminEntity
from app.domain.entities.RegistrationEntity import RegistrationEntity
from app.domain.entities.CellTherapyInterestEntity import CellTherapyInterestEntity

def create_tables():
    Base.metadata.create_all(bind=engine)
    print("✅ Tables created successfully.")

if __name__ == "__main__":
    create_tables()
