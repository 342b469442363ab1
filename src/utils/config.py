"""Load and validate environment variables. Uses python-dotenv.

This module is intentionally thin and side-effect free except for loading `.env`.
Callers should use the accessor functions below rather than reading `os.environ`
directly, to keep environment handling consistent.
"""

from pathlib import Path

from dotenv import load_dotenv
import logging
import os


def _project_root() -> Path:
    """Resolve project root (the directory holding app.py)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Uses override=True to ensure .env values take precedence over existing env vars.
    """
    root = _project_root()
    env_path = root / ".env"
    load_dotenv(env_path, override=True)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_float(key: str, default: float) -> float:
    """Get optional env var as float; return default if missing or invalid."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# --- Public config accessors ---

def storage_path() -> Path:
    """Optional: JSON file backing the durable key-value store. Default data/storage.json."""
    raw = get_optional("WALLET_STORAGE_PATH", "")
    if raw:
        return Path(raw)
    return _project_root() / "data" / "storage.json"


def contacts_storage_key() -> str:
    """Optional: storage key the contact directory is written under."""
    return get_optional("CONTACTS_STORAGE_KEY", "redicoin_contacts")


def initial_balance() -> float:
    """Optional: starting balance of a new session. Default 12450.75."""
    return get_optional_float("INITIAL_BALANCE", 12450.75)


def token_symbol() -> str:
    """Optional: ticker shown next to amounts. Default RC."""
    return get_optional("TOKEN_SYMBOL", "RC")


def log_file() -> Path | None:
    """Optional: file that receives a copy of the log. Default: stderr only."""
    raw = get_optional("WALLET_LOG_FILE", "")
    return Path(raw) if raw else None


def log_level() -> int:
    """Optional: logging level name (DEBUG, INFO, ...). Default INFO."""
    name = get_optional("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def project_root() -> Path:
    """Project root directory."""
    return _project_root()
