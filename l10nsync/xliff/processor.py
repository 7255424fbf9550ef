"""Shared XLIFF transformations used by the import and export tasks."""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, List, Mapping, Optional, Union

from lxml import etree

from . import locale_mapping
from .parser import XliffParser
from .writer import XliffWriter
from ..errors import StructuralQueryFailed
from ..models.translation_keys import DEFAULT_KEYS

logger = logging.getLogger(__name__)

# xcodebuild writes XLIFF 1.2 with a default namespace, so match on local names
FILE_XPATH = "./*[local-name()='file']"
TRANS_UNIT_XPATH = "./*[local-name()='body']/*[local-name()='trans-unit']"

FileNodeHook = Callable[[etree._Element], None]


class Mode(str, Enum):
    """Direction of a run, which decides how locale codes are mapped."""
    IMPORT = "import"  # Pontoon -> Xcode (ga-IE -> ga)
    EXPORT = "export"  # Xcode -> Pontoon (ga -> ga-IE)


def query(node: etree._Element, xpath: str) -> List[etree._Element]:
    """
    Evaluate an XPath expression relative to ``node``.

    The matches are returned as a list so callers can detach nodes while
    walking the result.

    Raises:
        StructuralQueryFailed: If the expression cannot be evaluated
    """
    try:
        return list(node.xpath(xpath))
    except etree.XPathError as e:
        raise StructuralQueryFailed(xpath, e) from e


def children_named(node: etree._Element, name: str) -> List[etree._Element]:
    """Direct child elements of ``node`` with the given local name."""
    return query(node, f"./*[local-name()='{name}']")


def sibling_tag(node: etree._Element, name: str) -> str:
    """Tag for a new element named ``name`` in the same namespace as ``node``."""
    namespace = etree.QName(node).namespace
    return f"{{{namespace}}}{name}" if namespace else name


def detach(node: etree._Element) -> None:
    """Remove a node from its parent, if it still has one."""
    parent = node.getparent()
    if parent is not None:
        parent.remove(node)


def text_of(node: etree._Element) -> str:
    return "".join(node.itertext())


class XliffProcessor:
    """
    Rule engine applied to every <file> node of an XLIFF document.

    For each file node, in order:
    1. Rewrite ``target-language`` when the locale maps to a different code
    2. Detect the ActionExtension InfoPlist exception
    3. Drop excluded translation units
    4. Run the caller's extra step, if any
    5. Remove the file node if no translation units remain
    """

    def __init__(
        self,
        excluded_translations: Iterable[str],
        mode: Mode,
        exception_key: str = DEFAULT_KEYS.exception_key,
    ):
        """
        Initialize the processor.

        Args:
            excluded_translations: Translation unit ids to remove
            mode: Import or export, for locale mapping direction
            exception_key: Id kept inside ActionExtension InfoPlist files
        """
        self.excluded_translations = frozenset(excluded_translations)
        self.mode = Mode(mode)
        self.exception_key = exception_key
        self.parser = XliffParser()

    def mapped_locale(self, locale: str) -> Optional[str]:
        """Return the mapped locale code, or ``None`` if the mapping is a no-op."""
        if self.mode is Mode.IMPORT:
            mapped = locale_mapping.to_xcode(locale)
        else:
            mapped = locale_mapping.to_pontoon(locale)
        return mapped if mapped != locale else None

    # File node helpers

    def is_action_extension_file(self, file_node: etree._Element) -> bool:
        """Whether the node holds the ActionExtension's InfoPlist strings."""
        original = file_node.get("original", "")
        return "Extensions/ActionExtension" in original and "InfoPlist.strings" in original

    def update_target_language(self, file_node: etree._Element, locale: str) -> None:
        mapped = self.mapped_locale(locale)
        if mapped and file_node.get("target-language") is not None:
            file_node.set("target-language", mapped)

    # Translation filtering

    def should_exclude_translation(
        self, translation_id: Optional[str], is_action_extension: bool
    ) -> bool:
        if translation_id is None:
            return False
        if translation_id == self.exception_key and is_action_extension:
            return False
        return translation_id in self.excluded_translations

    def filter_excluded_translations(
        self, file_node: etree._Element, is_action_extension: bool
    ) -> None:
        for translation in self.query_translations(file_node):
            if self.should_exclude_translation(translation.get("id"), is_action_extension):
                detach(translation)

    def remove_if_empty(self, file_node: etree._Element) -> None:
        if not self.query_translations(file_node):
            logger.debug("Removing empty file node %s", file_node.get("original"))
            detach(file_node)

    # Queries

    def query_translations(self, file_node: etree._Element) -> List[etree._Element]:
        """All <trans-unit> elements of a file node."""
        return query(file_node, TRANS_UNIT_XPATH)

    def query_file_nodes(self, root: etree._Element) -> List[etree._Element]:
        """All <file> elements under the document root."""
        return query(root, FILE_XPATH)

    # Processing

    def process_file_nodes(
        self,
        file_nodes: Iterable[etree._Element],
        locale: str,
        additional_processing: Optional[FileNodeHook] = None,
    ) -> None:
        for file_node in file_nodes:
            self.update_target_language(file_node, locale)
            is_action_extension = self.is_action_extension_file(file_node)
            self.filter_excluded_translations(file_node, is_action_extension)
            if additional_processing is not None:
                additional_processing(file_node)
            self.remove_if_empty(file_node)

    def process_document(
        self,
        tree: etree._ElementTree,
        locale: str,
        additional_processing: Optional[FileNodeHook] = None,
    ) -> etree._ElementTree:
        """Apply the rules to every file node of a parsed document, in place."""
        file_nodes = self.query_file_nodes(tree.getroot())
        self.process_file_nodes(file_nodes, locale, additional_processing)
        return tree

    def process_xliff(
        self,
        path: Union[str, Path],
        locale: str,
        writer: Optional[XliffWriter] = None,
        additional_processing: Optional[FileNodeHook] = None,
    ) -> None:
        """
        Parse, transform and rewrite an XLIFF file in place.

        Args:
            path: XLIFF file to process
            locale: Locale code used for ``target-language`` mapping
            writer: Serializer for the result (UTF-8, as parsed, by default)
            additional_processing: Extra step run on each file node before pruning

        Raises:
            DocumentParseFailed, InvalidXliffStructure, StructuralQueryFailed,
            WriteFailed
        """
        tree = self.parser.parse(path)
        self.process_document(tree, locale, additional_processing)
        (writer or XliffWriter()).write(tree, path)
        logger.debug("Processed %s for %s", path, locale)


def apply_comment_overrides(
    processor: XliffProcessor, overrides: Mapping[str, str]
) -> FileNodeHook:
    """Build a hook replacing each unit's <note> with its override, if one exists."""

    def hook(file_node: etree._Element) -> None:
        if not overrides:
            return
        for translation in processor.query_translations(file_node):
            comment = overrides.get(translation.get("id"))
            if comment is None:
                continue
            notes = children_named(translation, "note")
            if notes:
                note = notes[0]
                for child in list(note):
                    note.remove(child)
                note.text = comment

    return hook


def add_fallback_targets(processor: XliffProcessor, required: Iterable[str]) -> FileNodeHook:
    """Build a hook giving required units without a non-empty <target> one equal to their <source>."""
    required = frozenset(required)

    def hook(file_node: etree._Element) -> None:
        for translation in processor.query_translations(file_node):
            if translation.get("id") not in required:
                continue
            targets = children_named(translation, "target")
            if any(text_of(target).strip() for target in targets):
                continue
            sources = children_named(translation, "source")
            fallback = text_of(sources[0]) if sources else ""
            if targets:
                # an empty <target/> is filled in place
                target = targets[0]
                for child in list(target):
                    target.remove(child)
                target.text = fallback
                continue
            # SubElement reuses the in-scope namespace declaration
            target = etree.SubElement(translation, sibling_tag(translation, "target"))
            target.text = fallback
            if sources:
                target.tail = sources[0].tail
            translation.insert(1, target)

    return hook
