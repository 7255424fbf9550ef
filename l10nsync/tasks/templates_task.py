"""Creation of translation-free template XLIFF files."""

import logging
from dataclasses import dataclass
from pathlib import Path

from .discovery import TEMPLATES_DIR
from ..config import config
from ..file_operations import copy_with_replace, discard_abandoned_copy
from ..errors import ReplaceFailed
from ..xliff.parser import XliffParser
from ..xliff.processor import Mode, XliffProcessor, children_named, detach
from ..xliff.writer import XliffWriter

logger = logging.getLogger(__name__)


@dataclass
class TemplatesTask:
    """
    Builds ``templates/<xliff_name>`` from the reference locale's XLIFF.

    The copy keeps sources and notes but loses every ``target-language``
    attribute and every <target> element.
    """

    l10n_repo_path: str
    xliff_name: str
    reference_locale: str = config.template_locale

    def __post_init__(self):
        # Mode is irrelevant here, the processor is only used for queries
        self.processor = XliffProcessor(excluded_translations=(), mode=Mode.EXPORT)
        self.parser = XliffParser()
        self.writer = XliffWriter()

    @property
    def source_path(self) -> Path:
        return Path(self.l10n_repo_path) / self.reference_locale / self.xliff_name

    @property
    def template_path(self) -> Path:
        return Path(self.l10n_repo_path) / TEMPLATES_DIR / self.xliff_name

    def copy_reference_to_templates(self) -> Path:
        try:
            return copy_with_replace(self.source_path, self.template_path)
        except ReplaceFailed as e:
            discard_abandoned_copy(e)
            raise

    def strip_translations(self) -> None:
        tree = self.parser.parse(self.template_path)
        for file_node in self.processor.query_file_nodes(tree.getroot()):
            file_node.attrib.pop("target-language", None)
            for trans_unit in self.processor.query_translations(file_node):
                for target in children_named(trans_unit, "target"):
                    detach(target)
        self.writer.write(tree, self.template_path)

    def run(self) -> Path:
        """Create the template file and return its path."""
        self.copy_reference_to_templates()
        self.strip_translations()
        logger.info("Wrote template %s", self.template_path)
        return self.template_path
