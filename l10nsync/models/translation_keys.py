"""Translation unit ids with special handling during import and export."""

from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class TranslationKeys:
    """Immutable key sets shared by the import and export tasks."""

    # Platform identifiers that must never be sent to translators
    excluded_for_export: FrozenSet[str] = frozenset({
        "CFBundleName",
        "CFBundleDisplayName",
        "CFBundleShortVersionString",
        "1Password Fill Browser Action",
    })

    excluded_for_import: FrozenSet[str] = frozenset({
        "CFBundleName",
        "CFBundleDisplayName",
        "CFBundleShortVersionString",
    })

    # Allowed to survive filtering inside ActionExtension InfoPlist files
    exception_key: str = "CFBundleDisplayName"

    # Privacy prompts and shortcut titles, which must never ship empty
    base_required: FrozenSet[str] = frozenset({
        "NSCameraUsageDescription",
        "NSLocationWhenInUseUsageDescription",
        "NSMicrophoneUsageDescription",
        "NSPhotoLibraryAddUsageDescription",
        "ShortcutItemTitleNewPrivateTab",
        "ShortcutItemTitleNewTab",
        "ShortcutItemTitleQRCode",
    })

    widget_kit: FrozenSet[str] = frozenset({
        "TodayWidget.ClosePrivateTabsButton",
        "TodayWidget.ClosePrivateTabsLabelV2",
        "TodayWidget.GoToCopiedLinkLabelV1",
        "TodayWidget.NewPrivateTabButtonLabel",
        "TodayWidget.NewSearchButtonLabel",
        "TodayWidget.NewTabButtonLabelV1",
        "TodayWidget.PrivateSearchButtonLabel",
        "TodayWidget.QuickActionsGalleryDescription",
        "TodayWidget.QuickActionsGalleryTitle",
        "TodayWidget.QuickViewGalleryDescriptionV2",
        "TodayWidget.QuickViewGalleryTitle",
        "TodayWidget.SearchInFirefoxV2",
        "TodayWidget.SearchInPrivateTabLabelV2",
        "TodayWidget.TopSitesGalleryDescription",
        "TodayWidget.TopSitesGalleryTitleV2",
        "TodayWidget.ViewMore",
    })

    def required(self, include_widget_kit: bool = True) -> FrozenSet[str]:
        """Keys that need a target after import."""
        if include_widget_kit:
            return self.base_required | self.widget_kit
        return self.base_required


DEFAULT_KEYS = TranslationKeys()
