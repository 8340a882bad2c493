"""Environment-sourced settings for the chat service."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load `.env` only for local development
load_dotenv()

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_DB_PORT = 3307
DEFAULT_POOL_SIZE = 10


def _require(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(
            f"Missing required environment variable: {name}\n"
            f"Make sure it's set in your .env file or the process environment."
        )
    return value


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str
    db_user: str
    db_database: str
    gemini_model: str = DEFAULT_MODEL
    db_host: str = "localhost"
    db_port: int = DEFAULT_DB_PORT
    db_password: str = ""
    db_pool_size: int = DEFAULT_POOL_SIZE
    site_name: str = "Osmosis Learn"
    log_level: str = "INFO"

    @staticmethod
    def load(require_api_key: bool = True) -> "Settings":
        # Offline tooling only talks to the database and may run without a key
        api_key = _require("GEMINI_API_KEY") if require_api_key else os.getenv("GEMINI_API_KEY", "")

        return Settings(
            gemini_api_key=api_key,
            db_user=_require("DB_USER"),
            db_database=_require("DB_DATABASE"),
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
            db_host=os.getenv("DB_HOST", "localhost"),
            db_port=int(os.getenv("DB_PORT", str(DEFAULT_DB_PORT))),
            db_password=os.getenv("DB_PASSWORD", ""),
            db_pool_size=int(os.getenv("DB_POOL_SIZE", str(DEFAULT_POOL_SIZE))),
            site_name=os.getenv("HELPCHAT_SITE_NAME", "Osmosis Learn"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
