from .loader import apply_env_overrides, build_adapter, load_settings
from .models import StorageSettings

__all__ = [
    "StorageSettings",
    "apply_env_overrides",
    "build_adapter",
    "load_settings",
]
