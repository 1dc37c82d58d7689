"""Port definition for key-value persistence."""

from typing import Protocol


class KeyValueStoragePort(Protocol):
    """Port for a string key-value store holding named entries."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value for key, or None if it is absent.

        Raises CorruptStateError if the stored bytes cannot be decoded.
        """
        ...

    def set_item(self, key: str, value: str) -> None:
        """Overwrite the value stored under key."""
        ...
