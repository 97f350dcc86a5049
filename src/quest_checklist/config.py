# src/quest_checklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv

ENV_PREFIX = "QUEST"

DEFAULT_CATEGORIES: List[str] = [
    "メインクエスト",
    "サブクエスト",
    "装備・アイテム収集",
    "レベル上げ・育成",
    "素材集め",
    "ボス攻略",
    "その他",
]

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    # Category labels may contain spaces, so only commas separate items.
    return [p.strip() for p in raw.split(",") if p.strip()]


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    console_enabled: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    store_path: Path
    storage_key: str

    # ---- Checklist vocabulary ----
    categories: List[str]
    all_category: str
    default_category: str
    title_max_length: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "quest-checklist") or "quest-checklist"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/quest"))
        store_path = _env_path(_k("STORE_PATH"), data_dir / "checklist.sqlite3")
        storage_key = _env(_k("STORAGE_KEY"), "game-progress-tracker-tasks")

        categories = _env_list(_k("CATEGORIES"), DEFAULT_CATEGORIES)
        all_category = _env(_k("ALL_CATEGORY"), "ALL")
        default_category = _env(_k("DEFAULT_CATEGORY"), "その他")
        title_max_length = max(1, _env_int(_k("TITLE_MAX_LENGTH"), 100))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            data_dir=data_dir,
            store_path=store_path,
            storage_key=storage_key,
            categories=categories,
            all_category=all_category,
            default_category=default_category,
            title_max_length=title_max_length,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
