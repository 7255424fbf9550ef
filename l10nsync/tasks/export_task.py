"""Export of localizable strings from an Xcode project to the l10n repository."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from .shell import ToolRunner
from .templates_task import TemplatesTask
from ..config import config
from ..errors import L10nError, ReplaceFailed, WriteFailed
from ..file_operations import copy_with_replace, discard_abandoned_copy
from ..models.translation_keys import DEFAULT_KEYS
from ..xliff.comment_overrides import load_comment_overrides
from ..xliff.locale_mapping import to_pontoon
from ..xliff.processor import Mode, XliffProcessor, apply_comment_overrides

logger = logging.getLogger(__name__)


class LockedList:
    """A list that several worker threads can append to."""

    def __init__(self):
        self._values: list = []
        self._lock = threading.Lock()

    def append(self, value) -> None:
        with self._lock:
            self._values.append(value)

    @property
    def values(self) -> list:
        with self._lock:
            return list(self._values)


@dataclass
class ExportTask:
    """
    Exports XLIFF files for a set of locales.

    Steps:
    1. Run ``xcodebuild -exportLocalizations`` once for all locales
    2. Transform each locale's XLIFF concurrently (locale mapping, excluded
       keys, comment overrides, empty file pruning)
    3. Copy each result to ``<l10n repo>/<pontoon locale>/<xliff name>``

    Per-locale failures do not stop the other locales. They are all logged
    once every locale has finished, and the first one is raised.
    """

    xcode_proj_path: str
    l10n_repo_path: str
    locales: List[str]
    xliff_name: str = config.xliff_name
    export_base_path: str = config.export_base_path
    create_templates: bool = False
    max_workers: Optional[int] = None
    excluded_translations: frozenset = DEFAULT_KEYS.excluded_for_export
    runner: ToolRunner = field(default_factory=ToolRunner)

    def __post_init__(self):
        self.processor = XliffProcessor(
            excluded_translations=self.excluded_translations,
            mode=Mode.EXPORT,
        )

    @property
    def comment_overrides_path(self) -> Path:
        """``l10n_comments.txt`` next to the Xcode project."""
        return Path(self.xcode_proj_path).parent / config.comments_file_name

    def exported_xliff_path(self, locale: str) -> Path:
        return (
            Path(self.export_base_path)
            / f"{locale}.xcloc"
            / "Localized Contents"
            / f"{locale}.xliff"
        )

    def l10n_destination(self, locale: str) -> Path:
        return Path(self.l10n_repo_path) / to_pontoon(locale) / self.xliff_name

    def export_locales(self) -> None:
        """Run xcodebuild once with an -exportLanguage flag per locale."""
        arguments = [
            "-exportLocalizations",
            "-project", str(self.xcode_proj_path),
            "-localizationPath", str(self.export_base_path),
        ]
        for locale in self.locales:
            arguments += ["-exportLanguage", locale]
        self.runner.run(arguments, "xcodebuild -exportLocalizations")

    def handle_xml(self, locale: str, comment_overrides: Mapping[str, str]) -> None:
        """Transform the freshly exported XLIFF of one locale in place."""
        self.processor.process_xliff(
            self.exported_xliff_path(locale),
            locale,
            additional_processing=apply_comment_overrides(self.processor, comment_overrides),
        )

    def copy_to_l10n_repo(self, locale: str) -> Path:
        try:
            return copy_with_replace(
                self.exported_xliff_path(locale), self.l10n_destination(locale)
            )
        except ReplaceFailed as e:
            discard_abandoned_copy(e)
            raise

    def export_locale(
        self,
        locale: str,
        comment_overrides: Mapping[str, str],
        errors: LockedList,
    ) -> None:
        """Worker body: never raises, every failure lands in ``errors``."""
        try:
            self.handle_xml(locale, comment_overrides)
            self.copy_to_l10n_repo(locale)
            logger.info("Exported %s to %s", locale, self.l10n_destination(locale))
        except L10nError as e:
            errors.append(e)
        except Exception as e:
            errors.append(WriteFailed(locale, e))

    def run(self) -> None:
        """
        Execute the export.

        Raises:
            ProcessLaunchFailed, ExternalToolFailed: If xcodebuild fails
            L10nError: The first per-locale failure, after all were logged
        """
        self.export_locales()

        comment_overrides = load_comment_overrides(self.comment_overrides_path)
        errors = LockedList()

        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="l10n-export"
        ) as executor:
            for locale in self.locales:
                executor.submit(self.export_locale, locale, comment_overrides, errors)

        failures = errors.values
        if failures:
            for error in failures:
                logger.error("%s", error)
            raise failures[0]

        if self.create_templates:
            TemplatesTask(self.l10n_repo_path, self.xliff_name).run()
