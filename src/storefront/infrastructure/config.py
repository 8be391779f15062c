"""Runtime settings, read from the environment.

    STOREFRONT_DATA_DIR     directory for orders.json, carts.json, products.json
    STOREFRONT_SESSION      session ID used by the CLI when --session is omitted
    STOREFRONT_LOG_LEVEL    log level (falls back to LOG_LEVEL, then WARNING)
    STOREFRONT_LOG_FORMAT   "console" or "json"
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_SESSION_ID = "default"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    session_id: str
    log_level: str
    log_format: str

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"

    @property
    def carts_file(self) -> Path:
        return self.data_dir / "carts.json"

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    data_dir = env.get("STOREFRONT_DATA_DIR")
    log_format = env.get("STOREFRONT_LOG_FORMAT", "console").strip().lower()
    return Settings(
        data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
        session_id=env.get("STOREFRONT_SESSION") or DEFAULT_SESSION_ID,
        log_level=(env.get("STOREFRONT_LOG_LEVEL") or env.get("LOG_LEVEL") or "WARNING").upper(),
        log_format=log_format if log_format in ("console", "json") else "console",
    )
