import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv() # Optional: Load .env file


def resolve_log_level(value: str | None) -> int:
    """Level name from the environment, INFO when unset or unknown."""
    level = logging.getLevelName((value or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", "8003")) # Port for this service

LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL"))

# One <language>.txt template per language code
MESSAGES_DIR = Path(os.getenv("MESSAGES_DIR", str(Path(__file__).parent / "messages")))
DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")
