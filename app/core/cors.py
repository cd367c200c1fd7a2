from fastapi.middleware.cors import CORSMiddleware
from app.core.config import FRONTEND_URL

def setup_cors(app, env: str = "development"):
    """
    Set up CORS for the FastAPI app
    :param app: FastAPI instance
    :param env: current environment (development | production)
    """
    if env == "development":
        origins = [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5000",
        ]
    else:
        origins = []

    if FRONTEND_URL:
        origins.append(FRONTEND_URL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # preview deployments of the frontend
        allow_origin_regex=r"https://.*\.vercel\.app",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
