"""Settings loaded once from the environment (and .env) at startup."""
import os
from dataclasses import dataclass, field
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-2.0-flash:generateContent"
)
DEFAULT_TIMEOUT = 30.0
DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "https://emailreplygeneratorr.netlify.app",
)


def _origins(raw: str) -> Tuple[str, ...]:
    return tuple(o.strip() for o in raw.split(",") if o.strip())


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    api_key: str = field(default="", repr=False)
    timeout: float = DEFAULT_TIMEOUT
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS

    @classmethod
    def from_env(cls) -> "Settings":
        origins = _origins(os.getenv("CORS_ORIGINS", ""))
        return cls(
            api_url=(os.getenv("GEMINI_API_URL") or DEFAULT_API_URL).strip(),
            api_key=(os.getenv("GEMINI_API_KEY") or "").strip(),
            timeout=float(os.getenv("GEMINI_TIMEOUT_SECONDS") or DEFAULT_TIMEOUT),
            cors_origins=origins or DEFAULT_CORS_ORIGINS,
        )
