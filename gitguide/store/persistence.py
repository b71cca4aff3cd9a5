"""Persistence ports for the repository store.

The store only knows the StatePort protocol: load a snapshot dict (or None
when nothing is stored), save one, clear it. Where the blob lives is up to
the adapter.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class StatePort(Protocol):
    def load(self) -> dict | None: ...

    def save(self, snapshot: dict) -> None: ...

    def clear(self) -> None: ...


class MemoryStatePort:
    """Keeps the serialized snapshot in memory. Used by tests and `run` one-offs."""

    def __init__(self, initial: dict | None = None):
        self._blob = copy.deepcopy(initial)
        self.save_count = 0

    def load(self) -> dict | None:
        return copy.deepcopy(self._blob)

    def save(self, snapshot: dict) -> None:
        self._blob = copy.deepcopy(snapshot)
        self.save_count += 1

    def clear(self) -> None:
        self._blob = None


class JsonFileStatePort:
    """Stores the snapshot as a JSON file.

    Read and write problems are logged and swallowed: a broken state file
    means "start from the initial state", never a crash.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> dict | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning(f"[STORE] Failed to read state from {self.path}: {e}")
            return None
        if not isinstance(data, dict):
            logger.warning(f"[STORE] Ignoring state file {self.path}: not a JSON object")
            return None
        return data

    def save(self, snapshot: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(snapshot, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            logger.warning(f"[STORE] Failed to save state to {self.path}: {e}")

    def clear(self) -> None:
        try:
            if self.path.exists():
                self.path.unlink()
        except OSError as e:
            logger.warning(f"[STORE] Failed to clear state file {self.path}: {e}")
