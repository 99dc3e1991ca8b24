# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# memory | database
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory").lower()
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./storefront.db")
SEED_CATALOG = _flag("SEED_CATALOG", "true")

# anonymous clients without a header all land in this cart
DEFAULT_SESSION_ID = os.getenv("DEFAULT_SESSION_ID", "demo-session")
SESSION_HEADER = os.getenv("SESSION_HEADER", "x-session-id")

# local | redis | none
CART_LOCK_BACKEND = os.getenv("CART_LOCK_BACKEND", "local").lower()
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
CART_LOCK_TTL_SECONDS = int(os.getenv("CART_LOCK_TTL_SECONDS", 10))
CART_LOCK_WAIT_SECONDS = float(os.getenv("CART_LOCK_WAIT_SECONDS", 5))

# upper bound for a single cart line, merged totals included
MAX_LINE_QUANTITY = int(os.getenv("MAX_LINE_QUANTITY", 99))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# json lines instead of the console renderer
LOG_JSON = _flag("LOG_JSON", "false")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
