from abc import ABC, abstractmethod


class BaseStorage(ABC):
    """Contract for the string key/value stores behind the document cache."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete ``key``. Removing an absent key is not an error."""

    @abstractmethod
    def keys(self) -> list[str]:
        """Return every key currently stored."""
