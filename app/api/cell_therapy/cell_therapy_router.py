from fastapi import APIRouter, Depends, Query

from app.api.cell_therapy.cell_therapy_schemas import (
    CellTherapyInterestCreateResponse,
    CellTherapyInterestDeleteResponse,
    CellTherapyInterestListResponse,
    CellTherapyInterestRequest,
    CellTherapyInterestResponse,
    CellTherapyInterestSchema,
    CellTherapyInterestUpdateRequest,
)
from app.api.cell_therapy.cell_therapy_service import CellTherapyService, get_cell_therapy_service
from app.core.config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from app.domain.services.admin_session_gate import require_admin
from app.domain.response.custom_response import build_pagination

router = APIRouter(prefix="/cell-therapy-interest", tags=["cell-therapy-interest"])

@router.post("", response_model=CellTherapyInterestCreateResponse, status_code=201)
def submit_interest(form_data: CellTherapyInterestRequest, service: CellTherapyService = Depends(get_cell_therapy_service)):
    """Public: submit the cell therapy interest form."""
    entity = service.create(form_data)
    return {
        "success": True,
        "message": "Your interest has been submitted successfully. Our team will contact you within 3-5 business days.",
        "data": {
            "id": entity.id,
            "status": entity.status,
            "submittedAt": entity.create_datetime,
        },
    }

@router.get("", response_model=CellTherapyInterestListResponse)
def list_interests(
    status: str | None = None,
    trialNctId: str | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    service: CellTherapyService = Depends(get_cell_therapy_service),
    admin=Depends(require_admin),
):
    records, total = service.list(admin, status=status, trial_nct_id=trialNctId, page=page, limit=limit)
    return {
        "success": True,
        "data": [CellTherapyInterestSchema.model_validate(r) for r in records],
        "pagination": build_pagination(total, page, limit),
    }

@router.get("/{id}", response_model=CellTherapyInterestResponse)
def get_interest(id: str, service: CellTherapyService = Depends(get_cell_therapy_service), admin=Depends(require_admin)):
    entity = service.get(admin, id)
    return {"success": True, "data": CellTherapyInterestSchema.model_validate(entity)}

@router.patch("/{id}", response_model=CellTherapyInterestResponse)
def update_interest(
    id: str,
    form_data: CellTherapyInterestUpdateRequest,
    service: CellTherapyService = Depends(get_cell_therapy_service),
    admin=Depends(require_admin),
):
    entity = service.update(admin, id, form_data)
    return {
        "success": True,
        "message": "Submission updated successfully",
        "data": CellTherapyInterestSchema.model_validate(entity),
    }

@router.delete("/{id}", response_model=CellTherapyInterestDeleteResponse)
def delete_interest(id: str, service: CellTherapyService = Depends(get_cell_therapy_service), admin=Depends(require_admin)):
    service.delete(admin, id)
    return {"success": True, "message": "Submission deleted successfully"}
