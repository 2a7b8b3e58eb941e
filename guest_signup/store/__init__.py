from .base import InMemoryStore, Store
from .factory import RedisFactory, create_store
from .redis_store import RedisStore
from .utils import get_val, read_json, remove_key, set_val, write_json

__all__ = [
    "Store",
    "InMemoryStore",
    "RedisStore",
    "RedisFactory",
    "create_store",
    "read_json",
    "write_json",
    "get_val",
    "set_val",
    "remove_key",
]
