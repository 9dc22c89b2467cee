import csv
import io
import json
import logging
import os
from pathlib import Path

import pendulum

from passforge.config.config_passforge import EXPORT_DIR, DT_FORMAT_EXPORT, UTF8
from .batch_generator import BatchItem
from .history_store import HistoryStore

logger = logging.getLogger(__name__)

CSV_HEADER = ("Password", "Length", "Strength")


def batch_to_csv(items: list[BatchItem]) -> str:
    """
    Render batch rows as CSV text with a Password,Length,Strength header.

    Passwords containing commas or quotes are quoted by the csv module.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for item in items:
        writer.writerow((item.secret.value, item.secret.length, item.strength.label))
    return buf.getvalue()


def batch_to_json(items: list[BatchItem]) -> str:
    """Render batch rows as an indented JSON array."""
    return json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False)


def batch_to_text(items: list[BatchItem]) -> str:
    """One password per line, in batch order, for the clipboard."""
    return "\n".join(item.value for item in items)


def _write_export(text: str, file_name: str, directory: Path | str) -> Path:
    """
    Write an export file and force it to disk.

    Returns:
        Path of the written file.

    Raises:
        OSError: If the file cannot be written.
    """
    path = Path(directory) / file_name
    with open(path, "w", encoding=UTF8, newline="") as f:
        f.write(text)
        f.flush()
        os.fsync(f.fileno())  # force to disk
    return path


def export_batch_csv(items: list[BatchItem], directory: Path | str = EXPORT_DIR) -> Path:
    """
    Export batch rows to passwords_batch_<timestamp>.csv.

    Security Notes:
        - Passwords are written in plaintext.
    """
    timestamp = pendulum.now().format(DT_FORMAT_EXPORT)
    return _write_export(batch_to_csv(items), f"passwords_batch_{timestamp}.csv", directory)


def export_batch_json(items: list[BatchItem], directory: Path | str = EXPORT_DIR) -> Path:
    """Export batch rows to passwords_batch_<timestamp>.json."""
    timestamp = pendulum.now().format(DT_FORMAT_EXPORT)
    return _write_export(batch_to_json(items), f"passwords_batch_{timestamp}.json", directory)


def export_history_json(store: HistoryStore, directory: Path | str = EXPORT_DIR) -> Path | None:
    """
    Export the history ledger to password_history_<timestamp>.json.

    Returns:
        Path of the written file, or None if history is empty.
    """
    if not len(store):
        return None
    timestamp = pendulum.now().format(DT_FORMAT_EXPORT)
    path = _write_export(store.to_json(), f"password_history_{timestamp}.json", directory)
    logger.info(f"[{pendulum.now().to_iso8601_string()}] History exported to {path}")
    return path
