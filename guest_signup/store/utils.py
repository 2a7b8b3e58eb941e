import json
from typing import Any, Dict, Optional

from loguru import logger

from guest_signup.core.exceptions import StoreError
from guest_signup.store.base import Store


async def read_json(store: Store, key: str) -> Optional[Dict[str, Any]]:
    """Retrieve a JSON object from the store.

    Args:
        store: Store instance
        key: Key to retrieve

    Returns:
        Decoded dictionary, None when the key is absent, unreadable
        or does not hold a JSON object
    """
    try:
        raw = await store.get(key)
    except StoreError as e:
        logger.error(f"Store read failed for key '{key}': {e.detail}")
        return None

    if raw is None:
        logger.debug(f"Store miss: {key}")
        return None

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning(
            f"Failed to parse stored value for key '{key}': "
            f"{e.__class__.__name__}: {e!s}",
        )
        return None

    if not isinstance(data, dict):
        logger.warning(f"Stored value for key '{key}' is not a JSON object")
        return None
    return data


async def write_json(store: Store, key: str, data: Any) -> bool:
    """Serialize ``data`` as JSON and store it.

    Returns:
        True if stored successfully, False on error
    """
    try:
        payload = json.dumps(data)
        await store.set(key, payload)
        logger.debug(f"Store set: {key}")
        return True
    except (StoreError, TypeError, ValueError) as e:
        logger.error(
            f"Store write failed for key '{key}': {e.__class__.__name__}: {e!s}",
        )
        return False


async def get_val(store: Store, key: str) -> Optional[str]:
    """Retrieve a plain string value from the store."""
    try:
        return await store.get(key)
    except StoreError as e:
        logger.error(f"Error in get_val for key '{key}': {e.detail}")
        return None


async def set_val(store: Store, key: str, val: str) -> bool:
    """Store a plain string value."""
    try:
        await store.set(key, val)
        return True
    except StoreError as e:
        logger.error(f"Error in set_val for key '{key}': {e.detail}")
        return False


async def remove_key(store: Store, key: str) -> None:
    """Delete a key from the store."""
    try:
        await store.delete(key)
    except StoreError as e:
        logger.error(f"Error in remove_key for key '{key}': {e.detail}")
