"""Service layer exports."""

from .settings import InMemoryPreferenceStore, JsonPreferenceStore, PreferenceStore, ThemingPreferences

__all__ = [
    "InMemoryPreferenceStore",
    "JsonPreferenceStore",
    "PreferenceStore",
    "ThemingPreferences",
]
