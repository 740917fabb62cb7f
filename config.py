"""
Environment-driven settings for the Student Records API.
"""
import os
import logging
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def build_database_url() -> str:
    """
    Prefer a full connection string; otherwise assemble a MySQL URL from parts.
    """
    url = os.getenv("DATABASE_CONNECTION_STRING")
    if url:
        return url

    if not os.getenv("MYSQL_HOST"):
        raise ValueError(
            "DATABASE_CONNECTION_STRING or MYSQL_HOST environment variable is required"
        )

    return (
        f"mysql+pymysql://{os.getenv('MYSQL_USER')}:"
        f"{os.getenv('MYSQL_PASSWORD')}@"
        f"{os.getenv('MYSQL_HOST')}:{os.getenv('MYSQL_PORT', '3306')}/"
        f"{os.getenv('MYSQL_DB')}"
    )


DATABASE_URL = build_database_url()

PORT = int(os.getenv("PORT", 8080))

# e.g. "/api" when mounted behind a functions host
ROUTE_PREFIX = os.getenv("ROUTE_PREFIX", "").rstrip("/")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

logger.info(f"Route prefix: '{ROUTE_PREFIX or '/'}'")
