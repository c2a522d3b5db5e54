import os
from dotenv import load_dotenv

# load .env (API key etc.)
load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "https://truth-lensnetlifyapp.netlify.app",
    "https://truthlensnetlify.netlify.app",
    "http://localhost:3000",
    "http://localhost:3001",
    "http://127.0.0.1:3000",
]

GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY")
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-1.5-flash")
GEMINI_API_BASE = os.environ.get(
    "GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta"
)
GEMINI_TIMEOUT_SECONDS = float(os.environ.get("GEMINI_TIMEOUT_SECONDS", "30"))

PORT = int(os.environ.get("PORT", "3000"))
APP_ENV = os.environ.get("APP_ENV", "production")
STATIC_DIR = os.environ.get("STATIC_DIR", "public")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def _split_origins(raw: str | None) -> list[str]:
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]


CORS_ORIGINS = _split_origins(os.environ.get("CORS_ORIGINS"))


def is_development() -> bool:
    """Raw upstream error text is only exposed in development mode."""
    return os.environ.get("APP_ENV", APP_ENV).lower() == "development"
