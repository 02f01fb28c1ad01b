"""Tests for the calculate-price command-line entry point.

Verifies the stdout contract (exactly one 0x word line on success, nothing
on failure) and the exit codes for each error kind.
"""

import json
from pathlib import Path

import pytest

from pricecalc.config import AppSettings
from pricecalc.main import main, run

WAD = 10**18
SCENARIO = ["1000", "1100", "500000000000000000", "2000000000000000000000"]


class TestMainSuccess:
    """Successful invocations."""

    def test_reference_scenario(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints the 32-byte word for 102000e18 and exits 0."""
        code = main(SCENARIO)

        out = capsys.readouterr().out
        assert code == 0
        assert out == "0x" + format(102000 * WAD, "064x") + "\n"

    def test_exactly_one_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(SCENARIO)
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert len(lines[0]) == 66

    def test_zero_elapsed(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["1000", "1000", "500000000000000000", "2000000000000000000000"])
        assert code == 0
        assert capsys.readouterr().out == "0x" + "0" * 46 + "6c6b935b8bbd400000\n"

    def test_negative_number_positional(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A leading minus sign is read as a number, not an option."""
        code = main(["-100", "0", "0", str(WAD)])
        assert code == 0
        assert capsys.readouterr().out == "0x" + format(WAD, "064x") + "\n"

    def test_run_returns_word(self, app_settings: AppSettings) -> None:
        assert run(SCENARIO, app_settings) == "0x" + format(102000 * WAD, "064x")

    def test_unrelated_dotenv_keys_are_ignored(
        self,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
    ) -> None:
        """A calling project's .env with its own keys does not break startup."""
        (tmp_path / ".env").write_text(
            "RPC_URL=http://localhost:8545\nPRIVATE_KEY=0xabc\n", encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)

        code = main(SCENARIO)

        assert code == 0
        assert capsys.readouterr().out == "0x" + format(102000 * WAD, "064x") + "\n"


class TestMainFailure:
    """Failed invocations write nothing to stdout and exit non-zero."""

    def test_malformed_argument(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["1000", "1100", "abc", "2000000000000000000000"])

        captured = capsys.readouterr()
        assert code == 2
        assert captured.out == ""
        assert "calculation_failed" in captured.err
        assert "ParseError" in captured.err

    def test_missing_argument(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["1000", "1100"])
        assert code == 2
        assert capsys.readouterr().out == ""

    def test_extra_argument(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([*SCENARIO, "7"])
        assert code == 2
        assert capsys.readouterr().out == ""

    def test_negative_factor(self, capsys: pytest.CaptureFixture[str]) -> None:
        """2000 * (1 + 0.5 * -100) < 0 fails at encode time."""
        code = main(["1100", "1000", "500000000000000000", "2000000000000000000000"])

        captured = capsys.readouterr()
        assert code == 3
        assert captured.out == ""
        assert "EncodingError" in captured.err

    def test_overflow(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A result above 2**256 - 1 fails rather than wrapping."""
        code = main(["0", "0", "0", str(2**256 * WAD)])
        assert code == 3
        assert capsys.readouterr().out == ""

    def test_overflow_beyond_int_str_limit(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A 5000-digit result is an encoding failure, not a crash."""
        code = main(["0", "0", "0", "1e5000"])

        captured = capsys.readouterr()
        assert code == 3
        assert captured.out == ""
        assert "EncodingError" in captured.err

    def test_exponent_overflow(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Inputs past the decimal exponent range fail as encoding errors."""
        code = main(["0", "0", "0", "1e2000000"])

        captured = capsys.readouterr()
        assert code == 3
        assert captured.out == ""
        assert "EncodingError" in captured.err

    def test_whitespace_padded_argument(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["1000", "1100", " 500000000000000000", "2000000000000000000000"])
        assert code == 2
        assert capsys.readouterr().out == ""

    def test_json_diagnostics(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """LOG_FORMAT=json renders the failure as a JSON line on stderr."""
        monkeypatch.setenv("LOG_FORMAT", "json")
        code = main(["1000", "1100", "NaN", "1"])

        captured = capsys.readouterr()
        assert code == 2
        event = json.loads(captured.err.strip().splitlines()[-1])
        assert event["event"] == "calculation_failed"
        assert event["error"] == "ParseError"
        assert event["level"] == "error"
