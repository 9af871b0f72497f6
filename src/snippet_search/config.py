from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError


def _project_root() -> Path:
    """
    Resolve project root assuming this file lives in: <root>/src/snippet_search/config.py
    """
    return Path(__file__).resolve().parents[2]


class Settings(BaseModel):
    store_path: Path = Field(default_factory=lambda: _project_root() / "data" / "documents.json")
    top_k: int = Field(default=5, ge=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Loads environment variables (optionally from .env) and validates Settings.

    These are defaults only; commands accept an explicit --store path.
    """
    if env_file is None:
        env_file = _project_root() / ".env"

    # Load .env if present; environment variables override .env by default
    if env_file.exists():
        load_dotenv(env_file, override=False)

    data = {
        "store_path": os.getenv("SNIPPET_SEARCH_STORE", str(_project_root() / "data" / "documents.json")),
        "top_k": os.getenv("SNIPPET_SEARCH_TOP_K", "5"),
        "log_level": os.getenv("LOG_LEVEL", "WARNING").upper(),
    }

    try:
        return Settings(**data)
    except ValidationError as e:
        raise RuntimeError(
            "Invalid configuration. Check SNIPPET_SEARCH_STORE, SNIPPET_SEARCH_TOP_K and LOG_LEVEL.\n"
            f"Details:\n{e}"
        ) from e


# Convenience singleton-style access
settings = load_settings()
