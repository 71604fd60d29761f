"""
Ports - Small interfaces the tracker session depends on.

StoragePort stands in for the key-value store the records live in;
ConfirmationPort stands in for the "are you sure?" prompt.
Both have in-memory implementations used by tests and the memory backend.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class StoragePort(ABC):
    """String key-value storage."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key. Missing keys are ignored."""
        pass


class MemoryStorage(StoragePort):
    """Dict-backed storage."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class ConfirmationPort(ABC):
    """Asks the user to confirm a destructive action."""

    @abstractmethod
    def confirm(self, message: str) -> bool:
        pass


class StaticConfirmation(ConfirmationPort):
    """
    Answers every prompt with a fixed value.

    The API builds one per request from the client's confirm flag.
    Prompts are kept so tests can check what was asked.
    """

    def __init__(self, answer: bool):
        self.answer = answer
        self.prompts: List[str] = []

    def confirm(self, message: str) -> bool:
        self.prompts.append(message)
        return self.answer
