"""Data models for the localization sync tasks."""

from .manifest import XclocManifest
from .translation_keys import DEFAULT_KEYS, TranslationKeys

__all__ = [
    "DEFAULT_KEYS",
    "TranslationKeys",
    "XclocManifest",
]
