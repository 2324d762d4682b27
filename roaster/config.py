import os

from dotenv import load_dotenv

load_dotenv()

# Environment Configuration
ROAST_MODEL = os.getenv("ROAST_MODEL", "anthropic:claude-3-5-sonnet-20241022").strip()
ROAST_MAX_TOKENS = int(os.getenv("ROAST_MAX_TOKENS", "300"))

# 1 keeps provider calls strictly sequential
ROAST_CONCURRENCY = max(1, int(os.getenv("ROAST_CONCURRENCY", "1")))

ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "").strip().replace("\n", "")

ROASTER_SERVER_URL = os.getenv("ROASTER_SERVER_URL", "http://127.0.0.1:8000").rstrip("/")
LOG_LEVEL = os.getenv("ROASTER_LOG_LEVEL", "INFO").upper()
