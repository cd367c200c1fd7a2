import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities.RegistrationEntity import RegistrationEntity
from app.domain.exceptions import ConflictError, NotFoundError, StorageError

logger = logging.getLogger(__name__)

class registration_repository:
    def __init__(self, db: Session):
        self.db = db

    def _commit(self):
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # only the email column carries a unique index
            raise ConflictError("This email is already registered for a clinical trial") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"DB error while saving registration: {e}", exc_info=True)
            raise StorageError() from e

    def create(self, fields: Dict[str, Any]) -> RegistrationEntity:
        new_record = RegistrationEntity(**fields)
        self.db.add(new_record)
        self._commit()
        self.db.refresh(new_record)
        return new_record

    def get_by_id(self, id: str) -> RegistrationEntity:
        record = self.db.query(RegistrationEntity)\
                        .filter(RegistrationEntity.id == id)\
                        .first()
        if not record:
            raise NotFoundError("Registration not found")
        return record

    def list(self, status: Optional[str] = None, page: int = 1, limit: int = 100) -> Tuple[List[RegistrationEntity], int]:
        query = self.db.query(RegistrationEntity)
        if status:
            query = query.filter(RegistrationEntity.status == status)

        total = query.count()
        records = (
            query.order_by(RegistrationEntity.create_datetime.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return records, total

    def update(self, id: str, fields: Dict[str, Any]) -> RegistrationEntity:
        record = self.get_by_id(id)
        for key, value in fields.items():
            setattr(record, key, value)
        record.update_datetime = datetime.now()
        self._commit()
        self.db.refresh(record)
        return record

    def delete(self, id: str) -> RegistrationEntity:
        record = self.get_by_id(id)
        self.db.delete(record)
        self._commit()
        return record

    def count(self) -> int:
        return self.db.query(func.count(RegistrationEntity.id)).scalar()

    def count_by_status(self) -> Dict[str, int]:
        rows = (
            self.db.query(RegistrationEntity.status, func.count(RegistrationEntity.id))
            .group_by(RegistrationEntity.status)
            .all()
        )
        return {status: total for status, total in rows}

    def count_email_sent(self) -> int:
        return (
            self.db.query(func.count(RegistrationEntity.id))
            .filter(RegistrationEntity.email_sent == True)
            .scalar()
        )
