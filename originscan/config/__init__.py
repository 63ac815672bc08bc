from .settings import InferenceProvider, Settings, clear_settings_cache, get_settings

__all__ = [
    "InferenceProvider",
    "Settings",
    "clear_settings_cache",
    "get_settings",
]
