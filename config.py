"""
Configuration loader.
Reads settings from a .env file and the environment; every value has a default.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DEVELOPER_ID = "6256207236238699098"


@dataclass(frozen=True)
class Config:
    developer_id: str = DEFAULT_DEVELOPER_ID
    page_size: int = 50
    lang: str = "en"
    country: str = "us"
    port: int = 3001
    max_workers: int = 50          # cap on concurrent detail calls
    request_timeout: float = 10
    log_dir: str = "logs"

    @classmethod
    def from_env(cls, environ=None):
        if environ is None:
            load_dotenv()
            environ = os.environ

        return cls(
            developer_id=environ.get("PLAY_DEVELOPER_ID") or DEFAULT_DEVELOPER_ID,
            page_size=int(environ.get("PLAY_PAGE_SIZE") or 50),
            lang=environ.get("PLAY_LANG") or "en",
            country=environ.get("PLAY_COUNTRY") or "us",
            port=int(environ.get("PORT") or 3001),
            max_workers=int(environ.get("PLAY_MAX_WORKERS") or 50),
            request_timeout=float(environ.get("PLAY_REQUEST_TIMEOUT") or 10),
            log_dir=environ.get("LOG_DIR") or "logs",
        )
