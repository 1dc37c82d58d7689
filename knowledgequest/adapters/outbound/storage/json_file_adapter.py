"""JSON file adapter: one file per storage key under a data directory."""

import logging
import os
import re
import tempfile
from pathlib import Path

from ....core.domain.exceptions import CorruptStateError, StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)

# Keys become file names, so only a conservative character set is allowed
_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileStorageAdapter:
    """Key-value storage persisting each entry as ``<data_dir>/<key>.json``."""

    def __init__(self, data_dir: str | Path = "data") -> None:
        """Initialize the adapter.

        Args:
            data_dir: Directory holding one file per key.
        """
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key) or key in (".", ".."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.data_dir / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CorruptStateError(
                f"Storage entry '{key}' is not valid UTF-8", cause=e, context={"path": str(path)}
            ) from e
        except OSError as e:
            raise StorageReadError(
                f"Failed to read storage entry '{key}'", cause=e, context={"path": str(path)}
            ) from e

    def set_item(self, key: str, value: str) -> None:
        """Write the entry atomically (temp file + rename)."""
        path = self._path_for(key)
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    tmp.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("Failed to write storage entry %s: %s", key, e)
            raise StorageWriteError(
                f"Failed to write storage entry '{key}'", cause=e, context={"path": str(path)}
            ) from e
