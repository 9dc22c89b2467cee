from dataclasses import dataclass, field
import json

import pendulum

from .charsets import CharClassFlags, classify


@dataclass(frozen=True)
class HistoryEntry:
    """
    Represents a single archived secret.

    Stores the secret with its creation time and the character class
    flags derived from it. Entries are owned by HistoryStore.
    """
    id: str
    value: str
    created_at: str = field(default_factory=lambda: pendulum.now().to_iso8601_string())
    length: int = 0
    flags: CharClassFlags = field(default_factory=CharClassFlags)

    def __post_init__(self):
        """
        Validate required fields.

        Ensures the id is a non-empty string and the value a string.
        """
        if not isinstance(self.id, str) or not self.id:
            raise ValueError("Entry id cannot be empty")
        if not isinstance(self.value, str):
            raise TypeError("Entry value must be a string")

    @classmethod
    def create(cls, entry_id: str, value: str, created_at: str) -> "HistoryEntry":
        """Build an entry, deriving length and class flags from the value."""
        return cls(
            id=entry_id,
            value=value,
            created_at=created_at,
            length=len(value),
            flags=classify(value),
        )

    def __repr__(self):
        return (
            f"HistoryEntry(id={self.id}, "
            f"value=<hidden>, "
            f"length={self.length}, "
            f"created_at={self.created_at})"
        )

    @property
    def created(self) -> pendulum.DateTime:
        return pendulum.parse(self.created_at)

    def to_dict(self) -> dict:
        """
        Serialize entry to a dictionary.

        Returns:
            Dictionary representation used for storage and JSON export.
        """
        return {
            "id": self.id,
            "password": self.value,
            "timestamp": self.created_at,
            "length": self.length,
            "hasLowercase": self.flags.lower,
            "hasUppercase": self.flags.upper,
            "hasNumbers": self.flags.digit,
            "hasSymbols": self.flags.symbol,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryEntry":
        """
        Create an entry from stored data.

        Length and flags are recomputed from the password so a stored
        record cannot disagree with its own value.

        Raises:
            TypeError: If data is not a dict or a field has the wrong type.
            KeyError: If a required field is missing.
            ValueError: If the timestamp is not a date and time, or the
                password is empty.
        """
        if not isinstance(data, dict):
            raise TypeError("Entry data must be a dict")

        created_at = data["timestamp"]
        if not isinstance(created_at, str):
            raise TypeError("Entry timestamp must be a string")
        # Durations and intervals parse too; only a point in time is valid
        if not isinstance(pendulum.parse(created_at), pendulum.DateTime):
            raise ValueError(f"Entry timestamp {created_at!r} is not a date and time")

        value = data["password"]
        if not isinstance(value, str):
            raise TypeError("Entry password must be a string")
        if not value:
            raise ValueError("Entry password cannot be empty")

        return cls.create(data["id"], value, created_at)


def entries_to_json(entries) -> str:
    """Serialize entries as an indented JSON array."""
    return json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False)
