"""Local key-value persistence for puzzles and session flags.

Stored state is a cache: a missing, unreadable or corrupt entry reads as
"nothing saved" and never raises. Writes that fail raise
:class:`StoreError`; the :class:`PersistenceWriter` retries any failing
write, whatever the adapter raises, and drops it after the last retry.
"""

from __future__ import annotations

import json
import re
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol

from ..core.exceptions import StoreError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/collections/cruzadas")


class KeyValueStore(Protocol):
    """Protocol implemented by every persistence backend."""

    def load(self, key: str) -> Optional[Any]:
        ...

    def save(self, key: str, value: Any) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class MemoryStore:
    """In-process store; values are kept as JSON text like the file store."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def load(self, key: str) -> Optional[Any]:
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            LOGGER.warning("Discarding corrupt entry '%s': %s", key, exc)
            return None

    def save(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise StoreError(f"Value for '{key}' is not JSON serializable: {exc}") from exc

    def save_raw(self, key: str, text: str) -> None:
        self._data[key] = text

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> List[str]:
        return sorted(self._data)


class JsonFileStore:
    """One pretty-printed JSON file per key under ``store_dir``."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    def load(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not path.exists():
            LOGGER.debug("Store miss: %s", path.name)
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as exc:
            LOGGER.warning("Store read error (%s): %s", path.name, exc)
            return None

    def save(self, key: str, value: Any) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            text = json.dumps(value, ensure_ascii=False, indent=2)
            tmp_path.write_text(text, encoding="utf-8")
            tmp_path.replace(path)
        except (TypeError, ValueError, OSError) as exc:
            raise StoreError(f"Cannot save '{key}': {exc}") from exc
        LOGGER.debug("Stored %s", path.name)

    def remove(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as exc:
            raise StoreError(f"Cannot remove '{key}': {exc}") from exc

    def _path(self, key: str) -> Path:
        slug = re.sub(r"_+", "_", re.sub(r"[^a-z0-9]", "_", key.lower())).strip("_")
        if not slug:
            raise StoreError(f"Invalid store key {key!r}")
        return self.store_dir / f"{slug}.json"


class PersistenceWriter:
    """Runs store writes off the input path, one at a time, in submission order.

    A failed write is retried up to ``retries`` times; a write that still
    fails is logged and dropped since stored state is cache-only.
    """

    def __init__(self, retries: int = 2) -> None:
        self.retries = retries
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="cruzadas-store")
        self._pending: List[Future] = []

    def submit(self, description: str, operation: Callable[[], None]) -> Future:
        self._pending = [future for future in self._pending if not future.done()]
        future = self._executor.submit(self._run, description, operation)
        self._pending.append(future)
        return future

    def _run(self, description: str, operation: Callable[[], None]) -> bool:
        for attempt in range(1, self.retries + 2):
            try:
                operation()
                return True
            except Exception as exc:
                LOGGER.warning(
                    "Persisting %s failed (attempt %s/%s): %s", description, attempt, self.retries + 1, exc
                )
        LOGGER.error("Giving up on persisting %s", description)
        return False

    def flush(self) -> None:
        """Block until every submitted write has finished."""

        pending, self._pending = self._pending, []
        for future in pending:
            future.result()

    def close(self) -> None:
        self.flush()
        self._executor.shutdown(wait=True)
