"""ADSDASH — Central Configuration via Pydantic Settings."""

import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables / .env file."""

    # ── Hosted backend (Supabase REST) ──
    supabase_url: str = ""
    supabase_key: str = ""

    # ── Direct SQL backend ──
    database_url: str = ""

    # ── Gateway ──
    ads_table: str = "ads_data"
    ads_fetch_limit: int = 200
    request_timeout: float = 30.0

    # ── Dashboard ──
    page_size: int = 20
    gateway_url: str = ""  # empty → call the gateway in-process

    # ── App ──
    log_level: str = "INFO"
    version: str = "1.0.0"

    @property
    def use_rest_backend(self) -> bool:
        """True when the hosted backend's REST interface is configured."""
        return bool(self.supabase_url)

    @property
    def effective_database_url(self) -> str:
        """Return the configured SQL URL if set, otherwise fall back to SQLite."""
        if self.database_url:
            return self.database_url
        # Vercel has a read-only filesystem; use /tmp for SQLite
        if os.environ.get("VERCEL"):
            return "sqlite:////tmp/adsdash.db"
        return "sqlite:///./adsdash.db"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
