"""Tests for the east_asian_width.cli entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from east_asian_width.cli.main import main


@pytest.mark.unit
class TestBuildCommand:
    def test_writes_snapshot(
        self,
        ucd_fixture_path: Path,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        output = tmp_path / "eaw.json"

        exit_code = main(
            ["build", "--source", str(ucd_fixture_path), "--output", str(output)]
        )

        assert exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8"))["entry_count"] == 74
        assert "Parsed 74 entries" in capsys.readouterr().out

    def test_defaults_to_configured_source(self, tmp_path: Path) -> None:
        output = tmp_path / "eaw.json"

        assert main(["build", "--output", str(output)]) == 0
        assert output.exists()

    def test_malformed_source_fails(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "EastAsianWidth.txt"
        source.write_text("0020 ; Zz # Zs SPACE\n", encoding="utf-8")

        exit_code = main(
            ["build", "--source", str(source), "--output", str(tmp_path / "o.json")]
        )

        assert exit_code == 1
        assert "Unknown East Asian Width abbreviation" in capsys.readouterr().err
        assert not (tmp_path / "o.json").exists()


@pytest.mark.unit
class TestLookupCommand:
    def test_prints_known_and_unlisted(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["lookup", "0C92", "U+3000", "0x0378"])

        lines = capsys.readouterr().out.splitlines()
        assert exit_code == 0
        assert lines[0].startswith("U+0C92\tNEUTRAL\tLo\tU+0C92..U+0CA8")
        assert lines[0].endswith("KANNADA LETTER O..KANNADA LETTER NA")
        assert lines[1].startswith("U+3000\tFULL_WIDTH\tZs")
        assert lines[2] == "U+0378\tNEUTRAL\tCn\t(unlisted)"

    def test_rejects_non_hex(self) -> None:
        with pytest.raises(SystemExit):
            main(["lookup", "XYZ"])


@pytest.mark.unit
class TestAuditCommand:
    def test_writes_report(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main(
            [
                "audit",
                "--start",
                "0",
                "--stop",
                "A4",
                "--output-dir",
                str(tmp_path),
                "--workers",
                "1",
            ]
        )

        out = capsys.readouterr().out
        reports = list(tmp_path.glob("category_discrepancies_*.csv"))
        assert exit_code == 0
        assert "Scanned 164 code points" in out
        assert "Total mismatches: 0" in out
        assert len(reports) == 1

    def test_invalid_window_fails(self, tmp_path: Path) -> None:
        exit_code = main(
            ["audit", "--start", "200", "--stop", "100", "--output-dir", str(tmp_path)]
        )

        assert exit_code == 1
