from dotenv import load_dotenv
import os

load_dotenv()

# --- General ---
APP_ENV = os.getenv("APP_ENV", "development")
APP_NAME = os.getenv("APP_NAME", "Clinical Trials Registration API")
API_PREFIX = os.getenv("API_PREFIX", "/api")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
FRONTEND_URL = os.getenv("FRONTEND_URL")

# --- Database ---
DB_USER = os.getenv("DB_USER")
DB_PASS = os.getenv("DB_PASS")
DB_HOST = os.getenv("DB_HOST")
DB_PORT = os.getenv("DB_PORT", "3306")
DB_NAME = os.getenv("DB_NAME")
DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", 5))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", 10))
DB_POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", 3600))
DB_ISOLATION_LEVEL = os.getenv("DB_ISOLATION_LEVEL", "READ COMMITTED")

if os.getenv("DATABASE_URL"):
    DATABASE_URL = os.getenv("DATABASE_URL")
elif DB_HOST:
    DATABASE_URL = f"mysql+pymysql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
else:
    DATABASE_URL = "sqlite:///./clinical_trials.db"

# --- JWT Auth ---
SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
TOKEN_PREFIX = os.getenv("TOKEN_PREFIX", "Bearer ")
TOKEN_EXPIRATION_AFTER = int(os.getenv("TOKEN_EXPIRATION_AFTER", 60 * 24 * 30))
ALGORITHM = os.getenv("ALGORITHM", "HS256")
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 10))

# --- Submissions ---
DEFAULT_PAGE_LIMIT = int(os.getenv("DEFAULT_PAGE_LIMIT", 100))
MAX_PAGE_LIMIT = int(os.getenv("MAX_PAGE_LIMIT", 1000))
ENFORCE_STATUS_TRANSITIONS = os.getenv("ENFORCE_STATUS_TRANSITIONS", "false").lower() == "true"

# --- Seeding ---
ADMIN_INIT_USERNAME = os.getenv("ADMIN_INIT_USERNAME", "admin")
ADMIN_INIT_EMAIL = os.getenv("ADMIN_INIT_EMAIL", "admin@example.com")
ADMIN_INIT_PASSWORD = os.getenv("ADMIN_INIT_PASSWORD", "default_admin_pass")
