"""A single JSON document on disk, shared by the file-backed repositories.

Writes go to a sibling ``.tmp`` file that is then swapped in, so a
reader sees either the old document or the new one. Every ``JsonFile``
for the same path shares one lock, which repositories hold around
read-modify-write sequences.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any

from storefront.domain.exceptions import PersistenceError

_registry_lock = threading.Lock()
_path_locks: dict[Path, threading.RLock] = {}


def _lock_for(path: Path) -> threading.RLock:
    with _registry_lock:
        return _path_locks.setdefault(path.resolve(), threading.RLock())


class JsonFile:

    def __init__(self, path: Path, empty: Any) -> None:
        self.path = path
        self.lock = _lock_for(path)
        with self.lock:
            if not path.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
                self.write(empty)

    def read(self) -> Any:
        return json.loads(self.path.read_text(encoding="utf-8"))

    def write(self, document: Any) -> None:
        tmp_path = self.path.with_suffix(".tmp")
        try:
            tmp_path.write_text(
                json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
            tmp_path.replace(self.path)
        except OSError as exc:
            raise PersistenceError(f"Could not write {self.path.name}: {exc}") from exc
