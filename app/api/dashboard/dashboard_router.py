from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.api.cell_therapy.cell_therapy_repository import cell_therapy_repository
from app.api.registration.registration_repository import registration_repository
from app.core.database import get_db
from app.domain.services.admin_session_gate import require_admin
from app.domain.entities.CellTherapyInterestEntity import CellTherapyStatus
from app.domain.entities.RegistrationEntity import RegistrationStatus

router = APIRouter(prefix="/admin/dashboard", tags=["admin"])

class DashboardStats(BaseModel):
    total: int
    eligible: int
    underReview: int
    emailsSent: int
    generalInterest: int
    cellTherapy: int

class DashboardStatsResponse(BaseModel):
    success: bool = True
    data: DashboardStats

def collect_stats(db: Session) -> DashboardStats:
    registrations = registration_repository(db)
    interests = cell_therapy_repository(db)

    general = registrations.count()
    cell_therapy = interests.count()
    eligible = (
        registrations.count_by_status().get(RegistrationStatus.APPROVED.value, 0)
        + interests.count_by_status().get(CellTherapyStatus.ELIGIBLE.value, 0)
    )
    total = general + cell_therapy

    return DashboardStats(
        total=total,
        eligible=eligible,
        underReview=total - eligible,
        emailsSent=registrations.count_email_sent() + interests.count_email_sent(),
        generalInterest=general,
        cellTherapy=cell_therapy,
    )

@router.get("/stats", response_model=DashboardStatsResponse)
def dashboard_stats(db: Session = Depends(get_db), admin=Depends(require_admin)):
    return {"success": True, "data": collect_stats(db)}
