import sys
import os

# Add the project root to sys.path to import app
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from app.core.config import ADMIN_INIT_USERNAME, ADMIN_INIT_EMAIL, ADMIN_INIT_PASSWORD
from app.core.database import SessionLocal
from app.core.password import get_password_hash
from app.domain.entities.AdminEntity import AdminEntity

def seed_admin():
    db = SessionLocal()

    try:
        existing_admin = db.query(AdminEntity).filter_by(email=ADMIN_INIT_EMAIL.lower()).first()
        if not existing_admin:
            db.add(AdminEntity(
                username=ADMIN_INIT_USERNAME,
                email=ADMIN_INIT_EMAIL.lower(),
                password=get_password_hash(ADMIN_INIT_PASSWORD)
            ))
            db.commit()
            print(f"Seeded admin {ADMIN_INIT_USERNAME}")
        else:
            print(f"Admin {existing_admin.username} already exists, skipping")
    finally:
        db.close()

if __name__ == "__main__":
    seed_admin()
