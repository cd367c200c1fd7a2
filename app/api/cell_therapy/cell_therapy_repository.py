import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities.CellTherapyInterestEntity import CellTherapyInterestEntity, CellTherapyStatus
from app.domain.exceptions import NotFoundError, StorageError

logger = logging.getLogger(__name__)

class cell_therapy_repository:
    """CRUD for the t_cell_therapy_interests table."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self):
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"DB error while saving cell therapy interest: {e}", exc_info=True)
            raise StorageError() from e

    def create(self, fields: Dict[str, Any]) -> CellTherapyInterestEntity:
        new_record = CellTherapyInterestEntity(**fields)
        self.db.add(new_record)
        self._commit()
        self.db.refresh(new_record)
        return new_record

    def get_by_id(self, id: str) -> CellTherapyInterestEntity:
        record = self.db.query(CellTherapyInterestEntity)\
                        .filter(CellTherapyInterestEntity.id == id)\
                        .first()
        if not record:
            raise NotFoundError("Submission not found")
        return record

    def list(
        self,
        status: Optional[str] = None,
        trial_nct_id: Optional[str] = None,
        page: int = 1,
        limit: int = 100,
    ) -> Tuple[List[CellTherapyInterestEntity], int]:
        query = self.db.query(CellTherapyInterestEntity)
        if status:
            query = query.filter(CellTherapyInterestEntity.status == status)
        if trial_nct_id:
            query = query.filter(CellTherapyInterestEntity.trial_nct_id == trial_nct_id)

        total = query.count()
        records = (
            query.order_by(CellTherapyInterestEntity.create_datetime.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return records, total

    def update(self, id: str, fields: Dict[str, Any]) -> CellTherapyInterestEntity:
        record = self.get_by_id(id)
        for key, value in fields.items():
            setattr(record, key, value)
        record.update_datetime = datetime.now()
        self._commit()
        self.db.refresh(record)
        return record

    def delete(self, id: str) -> CellTherapyInterestEntity:
        record = self.get_by_id(id)
        self.db.delete(record)
        self._commit()
        return record

    def count(self) -> int:
        return self.db.query(func.count(CellTherapyInterestEntity.id)).scalar()

    def count_by_status(self) -> Dict[str, int]:
        rows = (
            self.db.query(CellTherapyInterestEntity.status, func.count(CellTherapyInterestEntity.id))
            .group_by(CellTherapyInterestEntity.status)
            .all()
        )
        return {status: total for status, total in rows}

    def count_email_sent(self) -> int:
        # the dashboard treats "contacted" as an e-mail having gone out
        return (
            self.db.query(func.count(CellTherapyInterestEntity.id))
            .filter(or_(
                CellTherapyInterestEntity.email_sent == True,
                CellTherapyInterestEntity.status == CellTherapyStatus.CONTACTED.value,
            ))
            .scalar()
        )
