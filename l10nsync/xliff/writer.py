"""Writer for XLIFF documents."""

from pathlib import Path
from typing import Union

from lxml import etree

from ..file_operations import write_atomically


class XliffWriter:
    """Serializes lxml trees back to disk without ever leaving a partial file."""

    def __init__(self, encoding: str = "UTF-8", pretty_print: bool = False):
        """
        Args:
            encoding: Character encoding of the written file
            pretty_print: Re-indent the document when serializing
        """
        self.encoding = encoding
        self.pretty_print = pretty_print

    def to_bytes(self, tree: etree._ElementTree) -> bytes:
        """Serialize a tree, XML declaration included."""
        return etree.tostring(
            tree,
            encoding=self.encoding,
            xml_declaration=True,
            pretty_print=self.pretty_print,
        )

    def write(self, tree: etree._ElementTree, output_path: Union[str, Path]) -> Path:
        """
        Write a tree to disk.

        Raises:
            WriteFailed: If the file could not be written
        """
        return write_atomically(output_path, self.to_bytes(tree))
