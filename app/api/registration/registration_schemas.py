from datetime import date, datetime
from pydantic import BaseModel, Field
from typing import Any, List, Optional, Union

from app.domain.entities.RegistrationEntity import RegistrationStatus

# Field rules live in app.domain.validation; these schemas only describe the wire shape.
class RegistrationRequest(BaseModel):
    fullName: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[Union[str, int]] = None
    age: Optional[Any] = None
    zipCode: Optional[Union[str, int]] = None
    healthInfo: Optional[str] = None
    dateOfBirth: Optional[date] = None
    researchArea: Optional[str] = None
    medicalConditions: Optional[str] = None
    consent: Optional[Any] = None

class RegistrationUpdateRequest(BaseModel):
    status: Optional[str] = None
    emailSent: Optional[Any] = None

class RegistrationSchema(BaseModel):
    id: str
    fullName: str = Field(validation_alias="full_name")
    email: str
    phone: str
    age: Optional[int] = None
    zipCode: Optional[str] = Field(default=None, validation_alias="zip_code")
    healthInfo: Optional[str] = Field(default=None, validation_alias="health_info")
    dateOfBirth: Optional[date] = Field(default=None, validation_alias="date_of_birth")
    researchArea: Optional[str] = Field(default=None, validation_alias="research_area")
    medicalConditions: Optional[str] = Field(default=None, validation_alias="medical_conditions")
    consent: bool
    status: RegistrationStatus
    emailSent: bool = Field(default=False, validation_alias="email_sent")
    createdAt: datetime = Field(validation_alias="create_datetime")
    updatedAt: datetime = Field(validation_alias="update_datetime")

    class Config:
        from_attributes = True
        populate_by_name = True

class SubmissionReceipt(BaseModel):
    id: str
    status: str
    submittedAt: datetime

class PaginationSchema(BaseModel):
    total: int
    page: int
    limit: int
    pages: int
    totalPages: int

class RegistrationCreateResponse(BaseModel):
    success: bool = True
    message: str
    data: SubmissionReceipt

class RegistrationResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: RegistrationSchema

class RegistrationListResponse(BaseModel):
    success: bool = True
    data: List[RegistrationSchema]
    pagination: PaginationSchema

class RegistrationDeleteResponse(BaseModel):
    success: bool = True
    message: str
