from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

import pytest

from l10nsync.errors import ExternalToolFailed

XLIFF_NS = "urn:oasis:names:tc:xliff:document:1.2"

Unit = Tuple[str, str, Optional[str], Optional[str]]  # id, source, target, note


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def make_xliff(
    files: Iterable[Tuple[str, Sequence[Unit]]],
    target_language: str = "fr",
    source_language: str = "en",
) -> str:
    """Build an XLIFF 1.2 document shaped like xcodebuild output."""
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<xliff xmlns="{XLIFF_NS}" version="1.2">',
    ]
    for original, units in files:
        parts.append(
            f'  <file original="{original}" source-language="{source_language}" '
            f'target-language="{target_language}" datatype="plaintext">'
        )
        parts.append("    <body>")
        for unit_id, source, target, note in units:
            parts.append(f'      <trans-unit id="{_escape(unit_id)}" xml:space="preserve">')
            parts.append(f"        <source>{_escape(source)}</source>")
            if target is not None:
                parts.append(f"        <target>{_escape(target)}</target>")
            if note is not None:
                parts.append(f"        <note>{_escape(note)}</note>")
            parts.append("      </trans-unit>")
        parts.append("    </body>")
        parts.append("  </file>")
    parts.append("</xliff>")
    return "\n".join(parts) + "\n"


def write_xliff(path: Path, files, target_language: str = "fr") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(make_xliff(files, target_language=target_language), encoding="utf-8")
    return path


def default_units(locale: str) -> List[Tuple[str, Sequence[Unit]]]:
    return [
        (
            "Client/en.lproj/Localizable.strings",
            [
                ("Menu.Open", "Open", f"Open-{locale}", "Menu item"),
                ("CFBundleName", "Firefox", "Firefox", None),
            ],
        ),
        (
            "Client/Info.plist/InfoPlist.strings",
            [("CFBundleDisplayName", "Firefox", "Firefox", None)],
        ),
    ]


class FakeRunner:
    """Stands in for xcodebuild: records calls and fabricates export output."""

    def __init__(self, exit_code: int = 0, units_for=default_units, broken: Iterable[str] = ()):
        self.calls: List[List[str]] = []
        self.exit_code = exit_code
        self.units_for = units_for
        self.broken = set(broken)

    def run(self, arguments, description):
        self.calls.append(list(arguments))
        if self.exit_code != 0:
            raise ExternalToolFailed(description, self.exit_code)
        if "-exportLocalizations" in arguments:
            base = Path(arguments[arguments.index("-localizationPath") + 1])
            locales = [
                arguments[i + 1]
                for i, value in enumerate(arguments)
                if value == "-exportLanguage"
            ]
            for locale in locales:
                path = base / f"{locale}.xcloc" / "Localized Contents" / f"{locale}.xliff"
                if locale in self.broken:
                    path.parent.mkdir(parents=True, exist_ok=True)
                    path.write_text("<xliff><file>", encoding="utf-8")
                else:
                    write_xliff(path, self.units_for(locale), target_language=locale)


def ids_in(content: str) -> List[str]:
    return re.findall(r'<trans-unit id="([^"]+)"', content)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def l10n_repo(tmp_path: Path) -> Path:
    repo = tmp_path / "l10n"
    repo.mkdir()
    return repo
