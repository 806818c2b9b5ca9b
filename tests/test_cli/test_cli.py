"""Tests for the trellis CLI commands."""
from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from trellis import __version__
from trellis.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"
MENU = str(FIXTURES / "menu.mark")
STYLE = str(FIXTURES / "style.mark")


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "inspect" in result.output
        assert "validate" in result.output
        assert "resolve" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# inspect
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_inspect_fixture(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["inspect", MENU])
        assert result.exit_code == 0
        assert "Root:       container" in result.output
        assert "Components: 5" in result.output
        assert "Depth:      3" in result.output
        assert '        label { text: "v0.1", opacity: 69% }  (line 9)' in result.output

    def test_inspect_parse_error(self, runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.mark"
        bad.write_text("root\nroot2\n")
        result = runner.invoke(cli, ["inspect", str(bad)])
        assert result.exit_code == 1
        assert "Parse error: line 2" in result.output

    def test_inspect_missing_file(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["inspect", "does-not-exist.mark"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_valid_template(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "ok.mark"
        path.write_text("root\n    child\n")
        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 0
        assert "OK: ok.mark is valid" in result.output

    def test_diagnostics_summary(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["validate", MENU, "--style", STYLE])
        assert result.exit_code == 0
        assert "Style rule for 'slider' matches no component." in result.output
        assert "Summary: 0 error(s), 0 warning(s), 1 info" in result.output

    def test_known_classes(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["validate", MENU, "--classes", "container,button"])
        assert result.exit_code == 0
        assert "Unknown component class 'label'." in result.output

    def test_warnings_counted_in_summary(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["validate", MENU, "--classes", "container,button"])
        assert result.exit_code == 0
        assert "Summary: 0 error(s), 1 warning(s), 0 info" in result.output

    def test_known_classes_from_env(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["validate", MENU], env={"TRELLIS_CLASSES": "container,label"}
        )
        assert "Unknown component class 'button'." in result.output

    def test_parse_error(self, runner: CliRunner, tmp_path: Path) -> None:
        style = tmp_path / "style.mark"
        style.write_text("button { a: 1, a: 2 }\n")
        result = runner.invoke(cli, ["validate", MENU, "--style", str(style)])
        assert result.exit_code == 1
        assert "duplicate attribute key 'a'" in result.output


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


class TestResolveCommand:
    def test_resolve_without_state(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", MENU, "--style", STYLE])
        assert result.exit_code == 0
        assert "color = (255, 255, 255)  <- style rule at" in result.output
        assert 'text = "Save"  <- template line 4' in result.output
        assert "size = (84, 24)  <- template line 7" in result.output

    def test_resolve_with_state(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", MENU, "--style", STYLE, "--state", "hovering=true"])
        assert result.exit_code == 0
        assert "color = (240, 240, 240)" in result.output
        assert "color = (255, 255, 255)" not in result.output

    def test_repeated_state_pairs_last_wins(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["resolve", MENU, "--style", STYLE, "--state", "hovering=false", "--state", "hovering=true"],
        )
        assert result.exit_code == 0
        assert "color = (240, 240, 240)" in result.output

    def test_bad_state_pair(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", MENU, "--state", "hovering"])
        assert result.exit_code == 2
        assert "expected key=value" in result.output

    def test_condition_error(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "t.mark"
        path.write_text("root { x?{ = }: 1 }\n")
        result = runner.invoke(cli, ["resolve", str(path)])
        assert result.exit_code == 1
        assert "Condition error" in result.output
