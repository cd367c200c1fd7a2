from datetime import datetime
from pydantic import BaseModel, EmailStr, Field
from typing import Optional

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class AdminRegisterRequest(BaseModel):
    username: str = Field(min_length=3, max_length=150)
    email: EmailStr
    password: str = Field(min_length=8)

# Admin as returned to the dashboard, password never included
class AdminSchema(BaseModel):
    id: str
    username: str
    email: str
    lastLogin: Optional[datetime] = Field(default=None, validation_alias="last_login")

    class Config:
        from_attributes = True
        populate_by_name = True

class LoginResponse(BaseModel):
    success: bool = True
    accessToken: str
    admin: AdminSchema

class AdminResponse(BaseModel):
    success: bool = True
    admin: AdminSchema
