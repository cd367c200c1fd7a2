import logging
from typing import Any, Dict, List, Optional, Tuple

from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.cell_therapy.cell_therapy_repository import cell_therapy_repository
from app.api.cell_therapy.cell_therapy_schemas import CellTherapyInterestRequest, CellTherapyInterestUpdateRequest
from app.core.database import get_db
from app.domain.entities.CellTherapyInterestEntity import CELL_THERAPY_FORM_TYPE, CellTherapyInterestEntity
from app.domain.exceptions import ValidationError
from app.domain.services.status_lifecycle import cell_therapy_lifecycle
from app.domain.validation.submission_validator import (
    check_cell_therapy_status,
    validate_cell_therapy_interest,
    validate_cell_therapy_update,
)

logger = logging.getLogger(__name__)

class CellTherapyService:
    def __init__(self, repo: cell_therapy_repository):
        self.repo = repo

    def create(self, form_data: CellTherapyInterestRequest) -> CellTherapyInterestEntity:
        fields = validate_cell_therapy_interest(form_data.model_dump())
        fields["form_type"] = CELL_THERAPY_FORM_TYPE
        fields["status"] = cell_therapy_lifecycle.initial
        entity = self.repo.create(fields)
        logger.info(f"[CellTherapy] Created {entity.id} (trial: {entity.trial_nct_id or '-'})")
        return entity

    def list(
        self,
        admin: Dict[str, Any],
        status: Optional[str] = None,
        trial_nct_id: Optional[str] = None,
        page: int = 1,
        limit: int = 100,
    ) -> Tuple[List[CellTherapyInterestEntity], int]:
        # an empty ?status= is no filter at all
        status = status or None
        if status is not None:
            errors = []
            status = check_cell_therapy_status(errors, status)
            if errors:
                raise ValidationError(errors)
        return self.repo.list(status=status, trial_nct_id=trial_nct_id, page=page, limit=limit)

    def get(self, admin: Dict[str, Any], id: str) -> CellTherapyInterestEntity:
        return self.repo.get_by_id(id)

    def update(self, admin: Dict[str, Any], id: str, form_data: CellTherapyInterestUpdateRequest) -> CellTherapyInterestEntity:
        """Partial update: only status, notes and emailSent are ever touched."""
        payload = form_data.model_dump(exclude_unset=True)
        # null status or flag means "leave as is"; null notes clears them
        payload = {k: v for k, v in payload.items() if v is not None or k == "notes"}
        fields = validate_cell_therapy_update(payload)

        current = self.repo.get_by_id(id)
        if "status" in fields:
            fields["status"] = cell_therapy_lifecycle.check_transition(current.status, fields["status"])

        entity = self.repo.update(id, fields)
        logger.info(f"[CellTherapy] {admin.get('user_name')} updated {id}: {sorted(fields)}")
        return entity

    def delete(self, admin: Dict[str, Any], id: str) -> None:
        self.repo.delete(id)
        logger.info(f"[CellTherapy] {admin.get('user_name')} deleted {id}")


def get_cell_therapy_service(db: Session = Depends(get_db)) -> CellTherapyService:
    return CellTherapyService(cell_therapy_repository(db))
