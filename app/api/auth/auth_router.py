import logging
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from app.api.auth.auth_schemas import AdminRegisterRequest, AdminResponse, AdminSchema, LoginRequest, LoginResponse
from app.core.database import get_db
from app.core.password import get_password_hash
from app.core.security import get_token_from_header
from app.domain.entities.AdminEntity import AdminEntity
from app.domain.exceptions import AuthError, ConflictError
from app.domain.repositories.admin_repository import AdminRepository
from app.domain.services.admin_session_gate import AdminSessionGate, get_admin_session_gate, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/login", response_model=LoginResponse)
def login(login_data: LoginRequest, gate: AdminSessionGate = Depends(get_admin_session_gate)):
    session = gate.verify(login_data.email, login_data.password)
    return {
        "success": True,
        "accessToken": session["token"],
        "admin": AdminSchema.model_validate(session["identity"])
    }

@router.post("/register", response_model=AdminResponse, status_code=201)
def register_admin(form_data: AdminRegisterRequest, db: Session = Depends(get_db), admin=Depends(require_admin)):
    repo = AdminRepository(db)

    if repo.get_by_username(form_data.username) or repo.get_by_email(form_data.email):
        raise ConflictError("Admin already exists")

    new_admin = AdminEntity(
        username=form_data.username,
        email=form_data.email.lower(),
        password=get_password_hash(form_data.password)
    )
    created = repo.create_admin(new_admin)
    logger.info(f"[Auth] {admin.get('user_name')} registered admin {created.username}")

    return {"success": True, "admin": AdminSchema.model_validate(created)}

@router.get("/verify", response_model=AdminResponse)
def verify_session(request: Request, gate: AdminSessionGate = Depends(get_admin_session_gate), admin=Depends(require_admin)):
    token = get_token_from_header(request)
    if not token:
        raise AuthError("Authorization header missing")
    return {"success": True, "admin": AdminSchema.model_validate(gate.validate(token))}
