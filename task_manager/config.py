from pathlib import Path
import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL

# Load environment variables from repo root and package/.env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")
load_dotenv(Path(__file__).resolve().parent / ".env")


def build_database_url() -> str:
    """Resolve the store connection string.

    DATABASE_URL wins when set; otherwise a Postgres URL is assembled from the
    individual DATABASE_* settings.
    """
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit

    url = URL.create(
        "postgresql+psycopg2",
        username=os.getenv("DATABASE_USER", "postgres"),
        password=os.getenv("DATABASE_PASSWORD", "postgres"),
        host=os.getenv("DATABASE_HOST", "localhost"),
        port=int(os.getenv("DATABASE_PORT", "5432") or 5432),
        database=os.getenv("DATABASE_NAME", "todoapp"),
    )
    return url.render_as_string(hide_password=False)


DATABASE_URL = build_database_url()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR") or None

_cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:5173")
CORS_ORIGINS = [origin.strip() for origin in _cors_origins.split(",") if origin.strip()]

# Client side
API_URL = os.getenv("API_URL", "http://localhost:3000")
TOAST_DURATION_SECONDS = float(os.getenv("TOAST_DURATION_SECONDS", "3"))
