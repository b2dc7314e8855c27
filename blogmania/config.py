"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent
CATEGORY_STORES = ("memory", "sql")


class Settings:
    ENV: str
    LOG_LEVEL: str
    CATEGORY_STORE: str
    DATABASE_URL: str
    ALLOW_DEV_CORS: bool

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.CATEGORY_STORE = os.getenv("CATEGORY_STORE", "memory").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE / 'blogmania.db'}")
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self._validate()

    def _validate(self):
        if self.CATEGORY_STORE not in CATEGORY_STORES:
            raise RuntimeError(
                f"CATEGORY_STORE must be one of {', '.join(CATEGORY_STORES)}, got {self.CATEGORY_STORE!r}"
            )


settings = Settings()
