"""Sync localizable strings between an Xcode project and a Pontoon l10n repository."""

__version__ = "0.1.0"
