from .local_storage import LocalFileStorage, create_local_storage
from .memory_storage import InMemoryStorage

__all__ = [
    "InMemoryStorage",
    "LocalFileStorage",
    "create_local_storage",
]
