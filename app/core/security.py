from datetime import datetime, timedelta
from typing import Any, Callable, Dict
from jose import jwt, JWTError, ExpiredSignatureError
from fastapi import Request
from app.core.config import TOKEN_EXPIRATION_AFTER, SECRET_KEY, ALGORITHM, TOKEN_PREFIX
from app.domain.entities.AdminEntity import Role
from app.domain.exceptions import AuthError, PermissionDeniedError

def create_access_token(data: dict, user_name: str, role_name: str, expires_delta: timedelta | None = None):
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=int(TOKEN_EXPIRATION_AFTER)))

    to_encode.update(
        {
            "exp": expire,
            "user_name": user_name,
            "role_name": role_name
        }
    )
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt

def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decode a JWT and return the caller identity stored in it.
    Raises AuthError when the token is expired, tampered with or incomplete.
    """
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise AuthError("Token expired")
    except JWTError:
        raise AuthError("Invalid token")

    if not payload.get("sub") or not payload.get("role_name"):
        raise AuthError("Invalid token")

    return {
        "id": payload.get("sub"),
        "user_name": payload.get("user_name"),
        "role_name": payload.get("role_name")
    }

def get_token_from_header(request: Request) -> str | None:
    """
    Read the JWT from the Authorization header, if any.
    Example:
        Authorization: Bearer <token>
    Returns <token>, or None when the header is missing or has no prefix.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        return None

    if auth_header.startswith(TOKEN_PREFIX):
        return auth_header[len(TOKEN_PREFIX):].strip() or None

    return None

def require_roles(*allowed_roles: str | Role) -> Callable:
    def dependency(request: Request) -> Dict[str, Any]:
        user = getattr(request.state, "user", None)
        if not user:
            token = get_token_from_header(request)
            if not token:
                raise AuthError("Authorization header missing")
            user = decode_access_token(token)

        allowed_role_values = [
            role.value if hasattr(role, "value") else role for role in allowed_roles
        ]

        if user.get("role_name") not in allowed_role_values:
            raise PermissionDeniedError()

        return user
    return dependency
