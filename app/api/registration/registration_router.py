from fastapi import APIRouter, Depends, Query

from app.api.registration.registration_schemas import (
    RegistrationCreateResponse,
    RegistrationDeleteResponse,
    RegistrationListResponse,
    RegistrationRequest,
    RegistrationResponse,
    RegistrationSchema,
    RegistrationUpdateRequest,
)
from app.api.registration.registration_service import RegistrationService, get_registration_service
from app.core.config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from app.domain.services.admin_session_gate import require_admin
from app.domain.response.custom_response import build_pagination

router = APIRouter(prefix="/registrations", tags=["registrations"])

@router.post("", response_model=RegistrationCreateResponse, status_code=201)
def create_registration(form_data: RegistrationRequest, service: RegistrationService = Depends(get_registration_service)):
    """Public: submit the general interest form."""
    entity = service.create(form_data)
    return {
        "success": True,
        "message": "Registration submitted successfully",
        "data": {
            "id": entity.id,
            "status": entity.status,
            "submittedAt": entity.create_datetime,
        },
    }

@router.get("", response_model=RegistrationListResponse)
def list_registrations(
    status: str | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    service: RegistrationService = Depends(get_registration_service),
    admin=Depends(require_admin),
):
    records, total = service.list(admin, status=status, page=page, limit=limit)
    return {
        "success": True,
        "data": [RegistrationSchema.model_validate(r) for r in records],
        "pagination": build_pagination(total, page, limit),
    }

@router.get("/{id}", response_model=RegistrationResponse)
def get_registration(id: str, service: RegistrationService = Depends(get_registration_service), admin=Depends(require_admin)):
    entity = service.get(admin, id)
    return {"success": True, "data": RegistrationSchema.model_validate(entity)}

@router.put("/{id}", response_model=RegistrationResponse)
def update_registration(
    id: str,
    form_data: RegistrationUpdateRequest,
    service: RegistrationService = Depends(get_registration_service),
    admin=Depends(require_admin),
):
    entity = service.update(admin, id, form_data)
    return {
        "success": True,
        "message": "Registration updated successfully",
        "data": RegistrationSchema.model_validate(entity),
    }

@router.delete("/{id}", response_model=RegistrationDeleteResponse)
def delete_registration(id: str, service: RegistrationService = Depends(get_registration_service), admin=Depends(require_admin)):
    service.delete(admin, id)
    return {"success": True, "message": "Registration deleted successfully"}
