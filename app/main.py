import logging
from fastapi import FastAPI, APIRouter
from app.core.config import APP_ENV, APP_NAME, API_PREFIX, LOG_LEVEL
from app.core.cors import setup_cors
from app.core.exception_handlers import setup_exception_handlers
from app.core.middleware import jwt_role_middleware

from app.api.auth import auth_router
from app.api.cell_therapy import cell_therapy_router
from app.api.dashboard import dashboard_router
from app.api.registration import registration_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title=APP_NAME)

app.middleware("http")(jwt_role_middleware)
setup_cors(app, env=APP_ENV)
setup_exception_handlers(app)

# Every resource lives under /api (configurable)
api_router = APIRouter(prefix=API_PREFIX)

api_router.include_router(auth_router.router)
api_router.include_router(registration_router.router)
api_router.include_router(cell_therapy_router.router)
api_router.include_router(dashboard_router.router)

@api_router.get("/health")
async def health():
    return {"status": "OK", "message": f"{APP_NAME} is running"}

app.include_router(api_router)

@app.get("/")
async def root():
    return {"message": f"{APP_NAME} backend is running 🚀"}
