from datetime import datetime
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.domain.entities.AdminEntity import AdminEntity
from app.domain.exceptions import ConflictError

class AdminRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, admin_id: str) -> AdminEntity | None:
        return self.db.query(AdminEntity).filter(AdminEntity.id == admin_id).first()

    def get_by_username(self, username: str) -> AdminEntity | None:
        return self.db.query(AdminEntity).filter_by(username=username).first()

    def get_by_email(self, email: str) -> AdminEntity | None:
        return self.db.query(AdminEntity).filter(AdminEntity.email == email.strip().lower()).first()

    def create_admin(self, adminEntity: AdminEntity) -> AdminEntity:
        self.db.add(adminEntity)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError("Admin already exists") from e
        self.db.refresh(adminEntity)
        return adminEntity

    def touch_last_login(self, adminEntity: AdminEntity) -> None:
        adminEntity.last_login = datetime.now()
        self.db.commit()
