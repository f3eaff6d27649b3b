import os
from dotenv import load_dotenv

# Load environment variables from .env file (one level up)
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), '..', '.env'))

# --- Configuration ---
GEMINI_API_BASE = os.getenv("GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta")
GENERATION_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
LOG_LEVEL = os.getenv("QUOTE_FINDER_LOG_LEVEL", "INFO").upper()

QUOTES_REQUESTED = 10
QUOTES_PER_PAGE = 5
MAX_ATTEMPTS = 5
INITIAL_DELAY_MS = 1000
REQUEST_TIMEOUT = 90  # seconds, per attempt


def get_api_key():
    """
    Reads GEMINI_API_KEY at call time so tests and reruns pick up changes.
    Returns None when the key is unset or blank.
    """
    return os.getenv("GEMINI_API_KEY", "").strip() or None


def get_api_url(model=None):
    """generateContent endpoint for the given model. The key is sent separately as a query param."""
    return f"{GEMINI_API_BASE.rstrip('/')}/models/{model or GENERATION_MODEL}:generateContent"
