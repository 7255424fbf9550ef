"""Import of translated XLIFF files from the l10n repository into an Xcode project."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, FrozenSet, List, Optional

from .shell import ToolRunner
from ..config import config
from ..file_operations import (
    copy_with_replace,
    create_directory_if_needed,
    write_atomically,
)
from ..models.manifest import XclocManifest
from ..models.translation_keys import DEFAULT_KEYS
from ..xliff.locale_mapping import to_xcode
from ..xliff.processor import Mode, XliffProcessor, add_fallback_targets
from ..xliff.writer import XliffWriter

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


@dataclass
class ImportTask:
    """
    Imports l10n repository XLIFF files, one locale at a time.

    For each locale an .xcloc bundle is assembled in ``work_dir``, its XLIFF
    is transformed (locale mapping, excluded keys, fallback targets for
    required keys) and ``xcodebuild -importLocalizations`` is run on it.
    The first failure stops the run; the failed bundle stays on disk.
    """

    xcode_proj_path: str
    l10n_repo_path: str
    locales: List[str]
    xliff_name: str = config.xliff_name
    development_region: str = config.development_region
    project_name: str = config.project_name
    skip_widget_kit: bool = False
    work_dir: str = config.import_work_dir
    excluded_translations: FrozenSet[str] = DEFAULT_KEYS.excluded_for_import
    runner: ToolRunner = field(default_factory=ToolRunner)
    progress_callback: Optional[ProgressCallback] = None

    def __post_init__(self):
        self.processor = XliffProcessor(
            excluded_translations=self.excluded_translations,
            mode=Mode.IMPORT,
        )
        # xcodebuild reads the imported XLIFF as pretty-printed UTF-16
        self.writer = XliffWriter(encoding="UTF-16", pretty_print=True)

    @property
    def required_translations(self) -> FrozenSet[str]:
        return DEFAULT_KEYS.required(include_widget_kit=not self.skip_widget_kit)

    def generate_manifest(self, target_locale: str) -> XclocManifest:
        return XclocManifest(
            developmentRegion=self.development_region,
            project=self.project_name,
            targetLocale=target_locale,
        )

    def xcloc_path(self, xcode_locale: str) -> Path:
        return Path(self.work_dir) / f"{xcode_locale}.xcloc"

    def write_manifest(self, path: Path, xcode_locale: str) -> None:
        manifest = self.generate_manifest(xcode_locale)
        write_atomically(path, manifest.to_json().encode("utf-8"))

    def create_xcloc(self, locale: str) -> Path:
        """
        Build the .xcloc bundle for a Pontoon locale.

        Returns:
            Path of the XLIFF copied into the bundle
        """
        source = Path(self.l10n_repo_path) / locale / self.xliff_name
        xcode_locale = to_xcode(locale)
        bundle = self.xcloc_path(xcode_locale)
        localized_contents = bundle / "Localized Contents"

        create_directory_if_needed(localized_contents)
        create_directory_if_needed(bundle / "Source Contents")
        self.write_manifest(bundle / "contents.json", xcode_locale)

        return copy_with_replace(source, localized_contents / f"{xcode_locale}.xliff")

    def validate_xml(self, xliff_path: Path, locale: str) -> None:
        """Transform the bundled XLIFF in place before xcodebuild sees it."""
        self.processor.process_xliff(
            xliff_path,
            locale,
            writer=self.writer,
            additional_processing=add_fallback_targets(
                self.processor, self.required_translations
            ),
        )

    def import_locale(self, xcloc_path: Path) -> None:
        self.runner.run(
            [
                "-importLocalizations",
                "-project", str(self.xcode_proj_path),
                "-localizationPath", str(xcloc_path),
            ],
            "xcodebuild -importLocalizations",
        )

    def prepare_locale(self, locale: str) -> None:
        xliff_path = self.create_xcloc(locale)
        self.validate_xml(xliff_path, locale)
        # <bundle>/Localized Contents/<locale>.xliff
        self.import_locale(xliff_path.parent.parent)

    def run(self) -> None:
        """
        Import every configured locale in order.

        Raises:
            L10nError: The first failure; remaining locales are not attempted
        """
        total = len(self.locales)
        for index, locale in enumerate(self.locales, start=1):
            if self.progress_callback:
                logger.debug("[%d/%d] Importing %s", index, total, locale)
                self.progress_callback(index, total, locale)
            else:
                logger.info("[%d/%d] Importing %s", index, total, locale)
            self.prepare_locale(locale)
