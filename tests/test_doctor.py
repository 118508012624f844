"""Tests for the ``itree doctor`` command (cli/doctor.py).

All external programs (fzf, tree, clipboard) are mocked — no system
dependency.

Coverage:
* Individual check functions return correct tuples.
* Doctor returns SUCCESS with everything present, and when only
  optional programs are missing.
* Doctor returns GENERAL_ERROR when fzf is missing.
* Plain output without Rich.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from itree.cli import exit_codes
from itree.infra.tool_detector import ToolStatus


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _found(name: str) -> ToolStatus:
    return ToolStatus(name=name, found=True, path=Path(f"/usr/bin/{name}"), install_commands=())


def _missing(name: str) -> ToolStatus:
    return ToolStatus(name=name, found=False, path=None, install_commands=(f"brew install {name}",))


def _detect(*missing: str) -> MagicMock:
    return MagicMock(side_effect=lambda name: _missing(name) if name in missing else _found(name))


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from itree.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestItreeVersionCheck:
    def test_returns_current_version(self) -> None:
        from itree.cli.doctor import _itree_version_check
        from itree.version import __version__

        label, value, status = _itree_version_check()
        assert label == "itree"
        assert value == __version__
        assert "OK" in status


class TestModuleCheck:
    def test_installed(self) -> None:
        from itree.cli.doctor import _module_check

        assert "OK" in _module_check("questionary", critical=True)[2]

    @patch("itree.cli.doctor.importlib.util.find_spec", return_value=None)
    def test_missing_critical(self, _mock_find: MagicMock) -> None:
        from itree.cli.doctor import _module_check

        label, value, status = _module_check("questionary", critical=True)
        assert value == "NOT INSTALLED"
        assert "FAIL" in status

    @patch("itree.cli.doctor.importlib.util.find_spec", return_value=None)
    def test_missing_optional(self, _mock_find: MagicMock) -> None:
        from itree.cli.doctor import _module_check

        assert "WARN" in _module_check("rich", critical=False)[2]


class TestToolCheck:
    def test_found(self) -> None:
        from itree.cli.doctor import _tool_check

        with patch("itree.cli.doctor.detect_tool", _detect()):
            label, value, status = _tool_check("fzf", critical=True)
        assert label == "fzf"
        assert value == str(Path("/usr/bin/fzf"))
        assert "OK" in status

    def test_missing_critical_fails(self) -> None:
        from itree.cli.doctor import _tool_check

        with patch("itree.cli.doctor.detect_tool", _detect("fzf")):
            assert "FAIL" in _tool_check("fzf", critical=True)[2]

    def test_missing_optional_warns(self) -> None:
        from itree.cli.doctor import _tool_check

        with patch("itree.cli.doctor.detect_tool", _detect("tree")):
            assert "WARN" in _tool_check("tree", critical=False)[2]


class TestClipboardCheck:
    @patch("itree.cli.doctor.find_clipboard_command", return_value=["xclip", "-selection", "clipboard"])
    def test_found(self, _mock_find: MagicMock) -> None:
        from itree.cli.doctor import _clipboard_check

        assert _clipboard_check() == ("clipboard", "xclip -selection clipboard", "[green]OK[/green]")

    @patch("itree.cli.doctor.find_clipboard_command", return_value=None)
    def test_missing(self, _mock_find: MagicMock) -> None:
        from itree.cli.doctor import _clipboard_check

        assert "WARN" in _clipboard_check()[2]


class TestOsCheck:
    @patch("itree.cli.doctor.platform.machine", return_value="arm64")
    @patch("itree.cli.doctor.platform.release", return_value="23.4.0")
    @patch("itree.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(
        self,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
    ) -> None:
        from itree.cli.doctor import _os_check

        _label, value, _status = _os_check()
        assert "macOS" in value
        assert "Darwin" not in value


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    @patch("itree.cli.doctor.find_clipboard_command", return_value=["pbcopy"])
    def test_all_pass_returns_success(self, _mock_clip: MagicMock) -> None:
        from itree.cli.doctor import run_doctor

        with patch("itree.cli.doctor.detect_tool", _detect()):
            assert run_doctor() == exit_codes.SUCCESS

    @patch("itree.cli.doctor.find_clipboard_command", return_value=None)
    def test_optional_missing_still_succeeds(self, _mock_clip: MagicMock) -> None:
        """tree and the clipboard are WARN, not FAIL."""
        from itree.cli.doctor import run_doctor

        with patch("itree.cli.doctor.detect_tool", _detect("tree")):
            assert run_doctor() == exit_codes.SUCCESS

    @patch("itree.cli.doctor.find_clipboard_command", return_value=["pbcopy"])
    def test_fzf_missing_fails(self, _mock_clip: MagicMock) -> None:
        from itree.cli.doctor import run_doctor

        with patch("itree.cli.doctor.detect_tool", _detect("fzf")):
            assert run_doctor() == exit_codes.GENERAL_ERROR

    @patch("itree.cli.doctor.find_clipboard_command", return_value=None)
    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output_shows_guidance(
        self,
        _mock_clip: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from itree.cli.doctor import run_doctor

        with patch("itree.cli.doctor.detect_tool", _detect("tree")):
            _ = run_doctor()

        out = capsys.readouterr().out
        assert "itree doctor" in out
        assert "brew install tree" in out
        assert "No clipboard utility found" in out
