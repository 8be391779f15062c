"""A JSON document file shared by the file-backed repositories.

Reads and read-modify-write cycles hold a per-file lock, and writes go to
a temporary file that replaces the original, so readers never see a
half-written document.  I/O and decode failures surface as
StorageUnavailableError.
"""

from __future__ import annotations

import json
import os
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import structlog

from storefront.domain.exceptions import StorageUnavailableError

logger = structlog.get_logger(__name__)

_file_locks: dict[Path, threading.RLock] = {}
_file_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _file_locks_guard:
        return _file_locks.setdefault(path, threading.RLock())


class JsonFile:

    def __init__(self, file_path: Path, initial: Callable[[], Any]) -> None:
        self._file_path = file_path.resolve()
        self._initial = initial
        self._lock = _lock_for(self._file_path)
        self._ensure_file()

    def read(self) -> Any:
        with self._lock:
            return self._load()

    @contextmanager
    def update(self) -> Iterator[Any]:
        """Yield the document for in-place changes, then write it back.

        The write is skipped if the block raises.
        """
        with self._lock:
            document = self._load()
            yield document
            self._persist(document)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> Any:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Storage read failed", path=str(self._file_path), error=str(exc))
            raise StorageUnavailableError(
                f"Could not read {self._file_path.name}: {exc}"
            ) from exc

    def _persist(self, document: Any) -> None:
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            tmp_path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            logger.error("Storage write failed", path=str(self._file_path), error=str(exc))
            raise StorageUnavailableError(
                f"Could not write {self._file_path.name}: {exc}"
            ) from exc

    def _ensure_file(self) -> None:
        with self._lock:
            if self._file_path.exists():
                return
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StorageUnavailableError(
                    f"Could not create data directory {self._file_path.parent}: {exc}"
                ) from exc
            self._persist(self._initial())
