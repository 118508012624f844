"""Tests for the fzf adapter (infra/fzf_selector.py).

``subprocess.run`` is mocked; fzf is never started.
"""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from itree.core.models import FuzzyOutcome
from itree.exceptions import MissingDependencyError
from itree.infra.fzf_selector import FzfSelector, outcome_for_exit_code, parse_selection


def _completed(returncode: int, stdout: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=["fzf"], returncode=returncode, stdout=stdout)


class TestOutcomeMapping:
    @pytest.mark.parametrize(
        ("code", "outcome"),
        [
            (0, FuzzyOutcome.CONFIRMED),
            (1, FuzzyOutcome.CANCELLED),
            (130, FuzzyOutcome.CANCELLED),
            (2, FuzzyOutcome.ERROR),
            (127, FuzzyOutcome.ERROR),
        ],
    )
    def test_exit_codes(self, code: int, outcome: FuzzyOutcome) -> None:
        assert outcome_for_exit_code(code) is outcome

    def test_parse_selection_drops_blank_lines(self) -> None:
        assert parse_selection("📁 src\n\n📝 README.md\n") == ("📁 src", "📝 README.md")


class TestBuildCommand:
    def test_minimal(self) -> None:
        command = FzfSelector().build_command(multi=False, prompt="Pick: ", header="h")
        assert command == ["fzf", "--no-multi", "--prompt=Pick: ", "--header=h"]

    def test_full(self) -> None:
        command = FzfSelector("/opt/fzf").build_command(
            multi=True,
            prompt="Navigate (/): ",
            header="h",
            preview="show {}",
            preview_window="right:50%",
            height="80%",
            bindings=("space:toggle+down", "q:abort"),
        )
        assert command == [
            "/opt/fzf",
            "--multi",
            "--prompt=Navigate (/): ",
            "--header=h",
            "--height=80%",
            "--preview=show {}",
            "--preview-window=right:50%",
            "--bind=space:toggle+down",
            "--bind=q:abort",
        ]

    def test_preview_window_needs_preview(self) -> None:
        command = FzfSelector().build_command(multi=True, prompt="p", header="h", preview_window="right")
        assert not any(arg.startswith("--preview-window") for arg in command)


class TestSelect:
    @patch("itree.infra.fzf_selector.subprocess.run")
    def test_confirmed(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(0, "📁 src\n")
        result = FzfSelector().select(["📁 src", "📁 docs"], multi=True, prompt="p", header="h")
        assert result.confirmed
        assert result.selected == ("📁 src",)
        assert mock_run.call_args.kwargs["input"] == "📁 src\n📁 docs\n"

    @patch("itree.infra.fzf_selector.subprocess.run")
    def test_cancel_discards_output(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(130, "📁 src\n")
        result = FzfSelector().select(["📁 src"], multi=True, prompt="p", header="h")
        assert result.outcome is FuzzyOutcome.CANCELLED
        assert result.selected == ()

    @patch("itree.infra.fzf_selector.subprocess.run")
    def test_error_keeps_exit_code(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(2)
        result = FzfSelector().select(["x"], multi=False, prompt="p", header="h")
        assert result.outcome is FuzzyOutcome.ERROR
        assert result.exit_code == 2

    @patch("itree.infra.fzf_selector.subprocess.run", side_effect=FileNotFoundError)
    def test_missing_binary(self, _mock_run: MagicMock) -> None:
        with pytest.raises(MissingDependencyError) as exc_info:
            FzfSelector().select(["x"], multi=False, prompt="p", header="h")
        assert exc_info.value.hint is not None
