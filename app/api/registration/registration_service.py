import logging
from typing import Any, Dict, List, Optional, Tuple

from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.registration.registration_repository import registration_repository
from app.api.registration.registration_schemas import RegistrationRequest, RegistrationUpdateRequest
from app.core.database import get_db
from app.domain.entities.RegistrationEntity import RegistrationEntity
from app.domain.exceptions import ValidationError
from app.domain.services.status_lifecycle import registration_lifecycle
from app.domain.validation.submission_validator import (
    check_registration_status,
    validate_registration,
    validate_registration_update,
)

logger = logging.getLogger(__name__)

class RegistrationService:
    """Intake and admin triage of general interest registrations."""

    def __init__(self, repo: registration_repository):
        self.repo = repo

    def create(self, form_data: RegistrationRequest) -> RegistrationEntity:
        fields = validate_registration(form_data.model_dump())
        fields["status"] = registration_lifecycle.initial
        # duplicate emails are rejected by the unique index, not by a lookup here
        entity = self.repo.create(fields)
        logger.info(f"[Registration] Created {entity.id}")
        return entity

    def list(self, admin: Dict[str, Any], status: Optional[str] = None, page: int = 1, limit: int = 100) -> Tuple[List[RegistrationEntity], int]:
        # an empty ?status= is no filter at all
        status = status or None
        if status is not None:
            errors = []
            status = check_registration_status(errors, status)
            if errors:
                raise ValidationError(errors)
        return self.repo.list(status=status, page=page, limit=limit)

    def get(self, admin: Dict[str, Any], id: str) -> RegistrationEntity:
        return self.repo.get_by_id(id)

    def update(self, admin: Dict[str, Any], id: str, form_data: RegistrationUpdateRequest) -> RegistrationEntity:
        fields = validate_registration_update(form_data.model_dump(exclude_unset=True, exclude_none=True))
        current = self.repo.get_by_id(id)
        if "status" in fields:
            fields["status"] = registration_lifecycle.check_transition(current.status, fields["status"])

        entity = self.repo.update(id, fields)
        logger.info(f"[Registration] {admin.get('user_name')} updated {id}: {sorted(fields)}")
        return entity

    def delete(self, admin: Dict[str, Any], id: str) -> None:
        self.repo.delete(id)
        logger.info(f"[Registration] {admin.get('user_name')} deleted {id}")


def get_registration_service(db: Session = Depends(get_db)) -> RegistrationService:
    return RegistrationService(registration_repository(db))
