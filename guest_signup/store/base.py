"""Key-value storage for state carried between steps of the flow."""

from typing import Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class Store(Protocol):
    """String-keyed store holding string values.

    Implementations raise :class:`~guest_signup.core.exceptions.StoreError`
    when the backend fails.
    """

    async def get(self, key: str) -> Optional[str]:
        """Return the value stored under ``key`` or None."""

    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""

    async def delete(self, key: str) -> None:
        """Remove ``key``; missing keys are ignored."""


class InMemoryStore:
    """Process-local store, the default backend and the one used in tests."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
