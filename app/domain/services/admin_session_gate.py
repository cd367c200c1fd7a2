import logging
from typing import Any, Dict

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.config import TOKEN_PREFIX
from app.core.database import get_db
from app.core.password import verify_password
from app.core.security import create_access_token, decode_access_token, get_token_from_header, require_roles
from app.domain.entities.AdminEntity import AdminEntity, Role
from app.domain.exceptions import AuthError
from app.domain.repositories.admin_repository import AdminRepository

logger = logging.getLogger(__name__)

class AdminSessionGate:
    """
    Authenticates admin callers.

    ``verify`` trades credentials for an identity and a session token;
    ``validate`` turns a token back into the admin it was issued to.
    """

    def __init__(self, repo: AdminRepository):
        self.repo = repo

    def verify(self, email: str, password: str) -> Dict[str, Any]:
        admin = self.repo.get_by_email(email)
        if not admin or not verify_password(password, admin.password):
            logger.warning("[Auth] Failed login attempt")
            raise AuthError("Invalid email or password")

        token = create_access_token({"sub": str(admin.id)}, admin.username, Role.ADMIN.value)
        self.repo.touch_last_login(admin)
        logger.info(f"[Auth] {admin.username} logged in")

        return {
            "identity": admin,
            "token": TOKEN_PREFIX + token
        }

    def validate(self, token: str) -> AdminEntity:
        if token.startswith(TOKEN_PREFIX):
            token = token[len(TOKEN_PREFIX):].strip()

        identity = decode_access_token(token)
        if identity["role_name"] != Role.ADMIN.value:
            raise AuthError("Invalid token")

        admin = self.repo.get_by_id(identity["id"])
        if not admin:
            raise AuthError("Admin no longer exists")
        return admin


def get_admin_session_gate(db: Session = Depends(get_db)) -> AdminSessionGate:
    return AdminSessionGate(AdminRepository(db))


def require_admin(
    request: Request,
    claims: Dict[str, Any] = Depends(require_roles(Role.ADMIN)),
    gate: AdminSessionGate = Depends(get_admin_session_gate),
) -> Dict[str, Any]:
    """
    Guard for admin routes.
    The role claim is checked first (403), then the gate confirms the admin
    behind the token still exists (401). Returns the identity handed to services.
    """
    token = get_token_from_header(request)
    if not token:
        raise AuthError("Authorization header missing")

    admin = gate.validate(token)
    return {
        "id": str(admin.id),
        "user_name": admin.username,
        "role_name": claims["role_name"]
    }
