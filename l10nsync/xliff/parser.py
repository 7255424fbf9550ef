"""Parser for XLIFF 1.2 documents produced by xcodebuild."""

from pathlib import Path
from typing import Union

from lxml import etree

from ..errors import DocumentParseFailed, InvalidXliffStructure


class XliffParser:
    """Loads XLIFF files into mutable lxml trees, keeping whitespace intact."""

    def _make_parser(self) -> etree.XMLParser:
        return etree.XMLParser(remove_blank_text=False, resolve_entities=False)

    def _check_root(self, root: etree._Element, source: str) -> None:
        name = etree.QName(root).localname
        if name != "xliff":
            raise InvalidXliffStructure(source, f"root element is <{name}>, expected <xliff>")

    def parse(self, file_path: Union[str, Path]) -> etree._ElementTree:
        """
        Parse an XLIFF file.

        Args:
            file_path: Path to the .xliff file

        Returns:
            The parsed element tree

        Raises:
            DocumentParseFailed: If the file is missing, unreadable or not XML
            InvalidXliffStructure: If the document is XML but not XLIFF
        """
        path = Path(file_path)
        try:
            tree = etree.parse(str(path), self._make_parser())
        except (OSError, etree.XMLSyntaxError) as e:
            raise DocumentParseFailed(str(path), e) from e
        self._check_root(tree.getroot(), str(path))
        return tree

    def parse_bytes(self, content: bytes, source: str = "<memory>") -> etree._ElementTree:
        """Parse XLIFF content held in memory."""
        try:
            root = etree.fromstring(content, self._make_parser())
        except etree.XMLSyntaxError as e:
            raise DocumentParseFailed(source, e) from e
        self._check_root(root, source)
        return etree.ElementTree(root)
