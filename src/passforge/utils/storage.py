import os
from pathlib import Path

from passforge.config.config_passforge import BASE_DIR, UTF8
from passforge.errors import PersistenceCorrupt, PersistenceWriteFailed


class KeyValueStore:
    """
    Device-local key/value slots, one file per key.

    Each slot holds a text document (JSON for history). Writes go to a
    temporary file first and are atomically swapped into place.
    """

    def __init__(self, base_dir: Path | str = BASE_DIR):
        self.base_dir = Path(base_dir)

    def _path(self, key: str) -> Path:
        return self.base_dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        """
        Read a slot.

        Returns:
            The stored text, or None if the slot does not exist.

        Raises:
            PersistenceCorrupt: If the slot exists but cannot be read.
        """
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding=UTF8)
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceCorrupt(f"Could not read slot '{key}': {e}") from e

    def set(self, key: str, text: str) -> None:
        """
        Overwrite a slot.

        Raises:
            PersistenceWriteFailed: If the slot cannot be written.
        """
        path = self._path(key)
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            # Write to temporary file first.
            with open(tmp, "w", encoding=UTF8) as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())  # force to disk
            os.replace(tmp, path)
        except OSError as e:
            raise PersistenceWriteFailed(f"Could not write slot '{key}': {e}") from e

    def remove(self, key: str) -> None:
        """
        Delete a slot. Missing slots are ignored.

        Raises:
            PersistenceWriteFailed: If the slot exists but cannot be removed.
        """
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceWriteFailed(f"Could not remove slot '{key}': {e}") from e
