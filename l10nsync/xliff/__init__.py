"""XLIFF reading, writing and transformation."""

from .comment_overrides import load_comment_overrides, parse_comment_overrides
from .locale_mapping import to_pontoon, to_xcode
from .parser import XliffParser
from .processor import Mode, XliffProcessor, add_fallback_targets, apply_comment_overrides
from .writer import XliffWriter

__all__ = [
    "Mode",
    "XliffParser",
    "XliffProcessor",
    "XliffWriter",
    "add_fallback_targets",
    "apply_comment_overrides",
    "load_comment_overrides",
    "parse_comment_overrides",
    "to_pontoon",
    "to_xcode",
]
