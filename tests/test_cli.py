from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

import l10nsync.cli as cli_module
from conftest import write_xliff
from l10nsync import __version__
from l10nsync.cli import cli
from l10nsync.errors import ExternalToolFailed


class RecordingTask:
    """Captures the keyword arguments a command builds its task with."""

    instances: list = []

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        RecordingTask.instances.append(self)

    def run(self):
        return None


@pytest.fixture
def recorded(monkeypatch):
    RecordingTask.instances = []
    monkeypatch.setattr(cli_module, "ExportTask", RecordingTask)
    monkeypatch.setattr(cli_module, "ImportTask", RecordingTask)
    return RecordingTask.instances


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _repo_with_locales(root: Path, *locales: str) -> Path:
    for locale in locales:
        (root / locale).mkdir(parents=True)
    return root


def test_version(runner) -> None:
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_export_requires_product_or_project(runner, tmp_path) -> None:
    result = runner.invoke(cli, ["export", "--l10n-project-path", str(tmp_path)])
    assert result.exit_code == 2
    assert "Must specify either --product or --project-path" in result.output


def test_export_rejects_product_and_project(runner, tmp_path) -> None:
    result = runner.invoke(cli, [
        "export",
        "--product", "firefox",
        "--project-path", "Client.xcodeproj",
        "--l10n-project-path", str(tmp_path),
    ])
    assert result.exit_code == 2
    assert "Cannot specify both" in result.output


def test_export_with_product_preset(runner, tmp_path, recorded) -> None:
    repo = _repo_with_locales(tmp_path / "l10n", "fr", "de", "templates", ".git")

    result = runner.invoke(cli, [
        "export",
        "--product", "focus",
        "--repo-root", str(tmp_path),
        "--l10n-project-path", str(repo),
    ])

    assert result.exit_code == 0, result.output
    task = recorded[0].kwargs
    assert task["xcode_proj_path"] == str(tmp_path / "focus-ios" / "Blockzilla.xcodeproj")
    assert task["xliff_name"] == "focus-ios.xliff"
    assert task["export_base_path"] == "/tmp/ios-localization-focus"
    assert task["locales"] == ["de", "fr"]
    assert task["create_templates"] is False


def test_export_single_locale_with_overrides(runner, tmp_path, recorded) -> None:
    result = runner.invoke(cli, [
        "export",
        "--project-path", "App/Client.xcodeproj",
        "--l10n-project-path", str(tmp_path),
        "--locale", "ga",
        "--xliff-name", "custom.xliff",
        "--export-base-path", str(tmp_path / "out"),
        "--create-templates",
    ])

    assert result.exit_code == 0, result.output
    task = recorded[0].kwargs
    assert task["xcode_proj_path"] == "App/Client.xcodeproj"
    assert task["locales"] == ["ga"]
    assert task["xliff_name"] == "custom.xliff"
    assert task["export_base_path"] == str(tmp_path / "out")
    assert task["create_templates"] is True


def test_import_discovers_locales(runner, tmp_path, recorded) -> None:
    repo = _repo_with_locales(tmp_path / "l10n", "ga-IE", "fr", "templates")

    result = runner.invoke(cli, [
        "import",
        "--project-path", "Client.xcodeproj",
        "--l10n-project-path", str(repo),
        "--skip-widget-kit",
    ])

    assert result.exit_code == 0, result.output
    task = recorded[0].kwargs
    assert task["locales"] == ["fr", "ga-IE"]
    assert task["skip_widget_kit"] is True
    assert task["xcode_proj_path"] == "Client.xcodeproj"
    assert callable(task["progress_callback"])


def test_task_errors_abort_with_message(runner, tmp_path, monkeypatch) -> None:
    class FailingTask(RecordingTask):
        def run(self):
            raise ExternalToolFailed("xcodebuild -importLocalizations", 70)

    monkeypatch.setattr(cli_module, "ImportTask", FailingTask)

    result = runner.invoke(cli, [
        "import",
        "--project-path", "Client.xcodeproj",
        "--l10n-project-path", str(tmp_path),
        "--locale", "fr",
    ])

    assert result.exit_code == 1
    assert "exit code 70" in result.output


def test_missing_l10n_repository_aborts(runner, tmp_path) -> None:
    result = runner.invoke(cli, [
        "import",
        "--project-path", "Client.xcodeproj",
        "--l10n-project-path", str(tmp_path / "missing"),
    ])

    assert result.exit_code == 1
    assert "Failed to list directory" in result.output


def test_templates_command(runner, tmp_path) -> None:
    repo = tmp_path / "l10n"
    write_xliff(
        repo / "en-US" / "firefox-ios.xliff",
        [("Client/Localizable.strings", [("Menu.Open", "Open", "Open", "Menu item")])],
        target_language="en-US",
    )

    result = runner.invoke(cli, [
        "templates",
        "--l10n-project-path", str(repo),
        "--xliff-name", "firefox-ios.xliff",
    ])

    assert result.exit_code == 0, result.output
    content = (repo / "templates" / "firefox-ios.xliff").read_text(encoding="utf-8")
    assert "<target>" not in content
    assert "<note>Menu item</note>" in content


def test_templates_without_reference_aborts(runner, tmp_path) -> None:
    result = runner.invoke(cli, ["templates", "--l10n-project-path", str(tmp_path)])
    assert result.exit_code == 1
    assert "Error" in result.output
