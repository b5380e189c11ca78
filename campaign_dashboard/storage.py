"""
Named slot storage for the local mock adapter

A slot holds one serialized value and is always rewritten whole.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from .protocols import CampaignStorageError

logger = logging.getLogger(__name__)


class MemorySlotStore:
    """Slots kept in process memory; lost when the process exits"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._slots: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._slots.get(key)

    def set(self, key: str, value: str) -> None:
        self._slots[key] = value

    def remove(self, key: str) -> None:
        self._slots.pop(key, None)


class FileSlotStore:
    """
    Slots persisted as `<key>.json` files in a directory.

    Writes go through a temporary file that is renamed into place, so a
    reader sees either the previous value or the new one.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        logger.debug(f"File slot store at {self.directory}")

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read slot {key}: {e}")
            raise CampaignStorageError(f"Failed to read storage slot '{key}': {e}") from e

    def set(self, key: str, value: str) -> None:
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp_path, self._path(key))
        except OSError as e:
            logger.error(f"Failed to write slot {key}: {e}")
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise CampaignStorageError(f"Failed to write storage slot '{key}': {e}") from e

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


__all__ = ["MemorySlotStore", "FileSlotStore"]
