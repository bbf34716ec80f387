"""
Environment-driven settings.

Every value is read at call time so tests can monkeypatch `os.environ`.
"""

from __future__ import annotations

import os

DEFAULT_DB_NAME = "kebabDB"
DEFAULT_SEED_CSV_PATH = "track_data_final.csv"
DEFAULT_SERVER_SELECTION_TIMEOUT_MS = 10_000

DEFAULT_CORS_ORIGINS = (
    "https://lenasun.me",
    "http://localhost:3001",
    "http://localhost:3000",
)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    return raw not in {"0", "false", "False", "no"}


def mongo_uri() -> str:
    uri = os.environ.get("MONGO_URI", "").strip()
    if not uri:
        raise RuntimeError("MONGO_URI is not set.")
    return uri


def db_name() -> str:
    return os.environ.get("DB_NAME", DEFAULT_DB_NAME).strip() or DEFAULT_DB_NAME


def server_selection_timeout_ms() -> int:
    value = _env_int("MONGO_SERVER_SELECTION_TIMEOUT_MS", DEFAULT_SERVER_SELECTION_TIMEOUT_MS)
    return value if value > 0 else DEFAULT_SERVER_SELECTION_TIMEOUT_MS


def seed_csv_path() -> str:
    return os.environ.get("SEED_CSV_PATH", DEFAULT_SEED_CSV_PATH).strip() or DEFAULT_SEED_CSV_PATH


def seed_mark_complete_on_error() -> bool:
    """
    Whether a dataset read/parse failure still counts as "seeded".

    True keeps a known-bad dataset from being rescanned on every request.
    False retries on the next request (useful when the file can appear later).
    """
    return _env_bool("SEED_MARK_COMPLETE_ON_ERROR", True)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
