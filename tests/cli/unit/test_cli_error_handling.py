"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from dto_schema_sync.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate-helpers"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--output-dir" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_configuration_returns_non_zero_exit(tmp_path: Path, capsys) -> None:
    exit_code = main(["generate", "--config", str(tmp_path / "absent.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert "Traceback" not in captured.err


def test_directory_preparation_failure_returns_non_zero_exit(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file", encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"descriptors:\n  inline: []\noutput:\n  directory: '{blocker / 'dtos'}'\n",
        encoding="utf-8",
    )

    exit_code = main(["generate", "--config", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Could not create output directory" in captured.err
