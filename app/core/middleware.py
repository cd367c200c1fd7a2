from fastapi import Request
from app.core.config import API_PREFIX
from app.core.security import decode_access_token, get_token_from_header
from app.domain.exceptions import AuthError
from app.domain.response.custom_response import custom_error_response

# Paths open to every method
BASE_EXEMPT_PATHS = [
    "/",
    "/docs",
    "/redoc",
    "/openapi.json",
    f"{API_PREFIX}/health",
]

# Public form submissions and login; the same paths stay admin-only for other methods
PUBLIC_ROUTES = {
    ("POST", f"{API_PREFIX}/registrations"),
    ("POST", f"{API_PREFIX}/cell-therapy-interest"),
    ("POST", f"{API_PREFIX}/auth/login"),
}


def is_public(method: str, path: str) -> bool:
    # Normalise: drop the trailing / so both forms match
    if len(path) > 1 and path.endswith('/'):
        path = path[:-1]

    if method == "OPTIONS":
        return True
    if path in BASE_EXEMPT_PATHS or path.startswith("/docs"):
        return True
    return (method, path) in PUBLIC_ROUTES


async def jwt_role_middleware(request: Request, call_next):

    if is_public(request.method, request.url.path):
        return await call_next(request)

    token = get_token_from_header(request)
    if not token:
        return custom_error_response(401, "Authorization header missing")

    try:
        # identity for this request only; handlers receive it through require_admin
        request.state.user = decode_access_token(token)
    except AuthError as e:
        return custom_error_response(e.status_code, e.message)

    return await call_next(request)
