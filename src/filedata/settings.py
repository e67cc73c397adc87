"""Store configuration loaded from env or config file."""
from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, Field

DEFAULT_DATA_DIRNAME = "Data"

BASE_DIR_ENV = "FILEDATA_BASE_DIR"
AUTH_TOKEN_ENV = "FILEDATA_AUTH_TOKEN"


class StoreSettings(BaseModel):
    """Settings shared by the store and the HTTP app."""

    base_directory: str | None = Field(None, description="Root folder for document files")
    auth_token: str | None = Field(None, description="Expected X-Auth-Token header value")


def program_directory() -> Path:
    """Directory of the running program's entry script, or cwd when there is none."""
    main = sys.modules.get("__main__")
    main_file = getattr(main, "__file__", None)
    if main_file:
        return Path(main_file).resolve().parent
    return Path.cwd()


def default_base_directory() -> Path:
    return program_directory() / DEFAULT_DATA_DIRNAME


def load_settings(config_path: str | Path | None = None) -> StoreSettings:
    config_payload: Dict[str, Any] = {}
    if config_path:
        try:
            config_payload = json.loads(Path(config_path).read_text(encoding="utf-8"))
        except FileNotFoundError:
            config_payload = {}

    return StoreSettings(
        base_directory=os.getenv(BASE_DIR_ENV) or config_payload.get("base_directory"),
        auth_token=os.getenv(AUTH_TOKEN_ENV) or config_payload.get("auth_token"),
    )
