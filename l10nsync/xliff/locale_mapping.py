"""Locale code mapping between Pontoon (l10n repository) and Xcode.

Pontoon uses codes like ``ga-IE`` or ``nb-NO`` where Xcode expects ``ga`` or
``nb``. Codes missing from the table are the same on both sides.
"""

from typing import Dict

PONTOON_TO_XCODE: Dict[str, str] = {
    "ga-IE": "ga",
    "nb-NO": "nb",
    "nn-NO": "nn",
    "sv-SE": "sv",
    "tl": "fil",
    "sat": "sat-Olck",
    "zgh": "tzm",
}

# Inverse of PONTOON_TO_XCODE; a duplicated Xcode code keeps the last entry.
XCODE_TO_PONTOON: Dict[str, str] = {
    xcode: pontoon for pontoon, xcode in PONTOON_TO_XCODE.items()
}


def to_xcode(pontoon_locale: str) -> str:
    """Convert a Pontoon locale code to its Xcode equivalent."""
    return PONTOON_TO_XCODE.get(pontoon_locale, pontoon_locale)


def to_pontoon(xcode_locale: str) -> str:
    """Convert an Xcode locale code to its Pontoon equivalent.

    ``en`` always becomes ``en-US``, the l10n repository's reference locale.
    """
    if xcode_locale == "en":
        return "en-US"
    return XCODE_TO_PONTOON.get(xcode_locale, xcode_locale)
