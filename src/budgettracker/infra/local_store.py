"""String-keyed JSON blob persisted to a single file.

Mirrors the browser key-value storage the hosted app used while offline:
each key holds a JSON array of entity rows. Reads and writes never raise;
problems are logged and the store carries on with what it has.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from ..logging_config import get_logger

TRANSACTIONS_KEY = "budget_tracker_transactions"
BUDGETS_KEY = "budget_tracker_budgets"
ACCOUNTS_KEY = "budget_tracker_accounts"

logger = get_logger("infra.local_store")


class LocalBlobStore:
    """Key → list-of-rows document stored at ``path``."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            logger.warning("Local store unreadable, treating as empty: %s", exc)
            return {}
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Local store corrupt, treating as empty: %s", exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Local store has unexpected shape %s", type(data).__name__)
            return {}
        return data

    def read(self, key: str) -> list[dict[str, Any]]:
        """Return the rows stored under ``key`` (empty when missing)."""

        rows = self._load().get(key, [])
        if not isinstance(rows, list):
            logger.warning("Local store key %s is not a list; ignoring", key)
            return []
        return [row for row in rows if isinstance(row, dict)]

    def write(self, key: str, rows: list[dict[str, Any]]) -> None:
        """Replace the rows stored under ``key``."""

        data = self._load()
        data[key] = rows
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, default=str), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.error("Failed to persist local store key %s: %s", key, exc)

    def keys(self) -> list[str]:
        return sorted(self._load().keys())
