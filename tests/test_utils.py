"""Tests for console helpers (src.utils)."""

from __future__ import annotations

import pytest

from src.scaffolder.models import GenerationReport, ReportEntry
from src.utils import format_created, print_error, print_plan, print_report, print_success


pytestmark = pytest.mark.unit


def _report() -> GenerationReport:
    return GenerationReport(
        entries=(
            ReportEntry(relative_path="src/modules/user/user.route.ts", byte_size=1520),
            ReportEntry(relative_path="src/modules/user/user.model.ts", byte_size=640),
        )
    )


class TestReportOutput:
    def test_format_created_markup(self):
        entry = ReportEntry(relative_path="src/a.ts", byte_size=12)
        assert format_created(entry) == "[green]CREATE[/green] src/a.ts [blue](12 bytes)[/blue]"

    def test_markup_in_path_is_escaped(self):
        entry = ReportEntry(relative_path="src/[bold]/a.ts", byte_size=1)
        assert "\\[bold]" in format_created(entry)

    def test_print_report_plain_text(self, capsys: pytest.CaptureFixture[str]):
        print_report(_report())
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "CREATE src/modules/user/user.route.ts (1520 bytes)",
            "CREATE src/modules/user/user.model.ts (640 bytes)",
        ]

    def test_print_report_matches_entry_lines(self, capsys: pytest.CaptureFixture[str]):
        report = _report()
        print_report(report)
        assert capsys.readouterr().out.splitlines() == report.lines()

    def test_print_plan(self, capsys: pytest.CaptureFixture[str]):
        print_plan([("src/a.ts", 10), ("src/b.ts", 20)])
        out = capsys.readouterr().out
        assert "Dry run" in out
        assert "src/a.ts" in out
        assert "20" in out


class TestStatusMessages:
    def test_success(self, capsys: pytest.CaptureFixture[str]):
        print_success("6 files generated")
        assert "6 files generated" in capsys.readouterr().out

    def test_error_keeps_brackets(self, capsys: pytest.CaptureFixture[str]):
        print_error("Invalid resource path '[x]/'")
        assert "Invalid resource path '[x]/'" in capsys.readouterr().out
