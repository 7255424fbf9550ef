from pathlib import Path

import pytest

from conftest import write_xliff
from l10nsync.errors import CopyFailed
from l10nsync.tasks.templates_task import TemplatesTask


def test_creates_stripped_template(l10n_repo: Path) -> None:
    write_xliff(l10n_repo / "en-US" / "firefox-ios.xliff", [
        ("Client/Localizable.strings", [
            ("Menu.Open", "Open", "Open", "Menu item"),
            ("Menu.Close", "Close", "Close", None),
        ]),
        ("Client/InfoPlist.strings", [("NSCameraUsageDescription", "Camera", "Camera", "Prompt")]),
    ], target_language="en-US")

    path = TemplatesTask(str(l10n_repo), "firefox-ios.xliff").run()

    assert path == l10n_repo / "templates" / "firefox-ios.xliff"
    content = path.read_text(encoding="utf-8")
    assert "target-language" not in content
    assert "<target>" not in content
    assert 'source-language="en"' in content
    assert "<source>Open</source>" in content
    assert "<note>Menu item</note>" in content
    assert "<note>Prompt</note>" in content


def test_reference_file_is_untouched(l10n_repo: Path) -> None:
    reference = write_xliff(
        l10n_repo / "en-US" / "focus-ios.xliff",
        [("a", [("k", "v", "v", None)])],
        target_language="en-US",
    )
    before = reference.read_bytes()

    TemplatesTask(str(l10n_repo), "focus-ios.xliff").run()

    assert reference.read_bytes() == before


def test_missing_reference_raises(l10n_repo: Path) -> None:
    with pytest.raises(CopyFailed):
        TemplatesTask(str(l10n_repo), "firefox-ios.xliff").run()
    assert not (l10n_repo / "templates" / "firefox-ios.xliff").exists()
