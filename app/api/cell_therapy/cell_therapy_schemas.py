from datetime import datetime
from pydantic import BaseModel, Field
from typing import Any, List, Optional, Union

from app.api.registration.registration_schemas import PaginationSchema, SubmissionReceipt
from app.domain.entities.CellTherapyInterestEntity import CellTherapyStatus

class CellTherapyInterestRequest(BaseModel):
    fullName: Optional[str] = None
    email: Optional[str] = None
    mobileNumber: Optional[Union[str, int]] = None
    zipCode: Optional[Union[str, int]] = None
    age: Optional[Any] = None
    currentDiagnosis: Optional[str] = None
    currentHealthStatus: Optional[str] = None
    trialNctId: Optional[str] = None
    trialTitle: Optional[str] = None

class CellTherapyInterestUpdateRequest(BaseModel):
    status: Optional[str] = None
    notes: Optional[str] = None
    emailSent: Optional[Any] = None

class CellTherapyInterestSchema(BaseModel):
    id: str
    fullName: str = Field(validation_alias="full_name")
    email: str
    mobileNumber: str = Field(validation_alias="mobile_number")
    zipCode: str = Field(validation_alias="zip_code")
    age: int
    currentDiagnosis: str = Field(validation_alias="current_diagnosis")
    currentHealthStatus: str = Field(validation_alias="current_health_status")
    trialNctId: Optional[str] = Field(default=None, validation_alias="trial_nct_id")
    trialTitle: Optional[str] = Field(default=None, validation_alias="trial_title")
    formType: str = Field(validation_alias="form_type")
    status: CellTherapyStatus
    notes: Optional[str] = None
    emailSent: bool = Field(default=False, validation_alias="email_sent")
    createdAt: datetime = Field(validation_alias="create_datetime")
    updatedAt: datetime = Field(validation_alias="update_datetime")

    class Config:
        from_attributes = True
        populate_by_name = True

class CellTherapyInterestCreateResponse(BaseModel):
    success: bool = True
    message: str
    data: SubmissionReceipt

class CellTherapyInterestResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: CellTherapyInterestSchema

class CellTherapyInterestListResponse(BaseModel):
    success: bool = True
    data: List[CellTherapyInterestSchema]
    pagination: PaginationSchema

class CellTherapyInterestDeleteResponse(BaseModel):
    success: bool = True
    message: str
