"""Reporters for hierarchy analysis results."""

import json
from typing import TYPE_CHECKING, Protocol

import typer

if TYPE_CHECKING:
    from solid_base_linter.domain.entities import HierarchyReport
    from solid_base_linter.domain.protocols import GuidanceServiceProtocol


class HierarchyReporter(Protocol):
    """Protocol for reporting hierarchy analysis results."""

    def report(self, report: "HierarchyReport", format: str = "text") -> None:
        """Render the report. format: text (default) or json."""
        ...


class TerminalHierarchyReporter(HierarchyReporter):
    """Writes diagnostics to stdout, one per line, followed by a summary."""

    FORMATS: tuple[str, ...] = ("text", "json")

    def __init__(self, guidance_service: "GuidanceServiceProtocol | None" = None) -> None:
        self._guidance = guidance_service

    def report(self, report: "HierarchyReport", format: str = "text") -> None:
        if format == "json":
            typer.echo(json.dumps(report.to_dict(), indent=2))
            return
        for diagnostic in report.diagnostics:
            color = typer.colors.RED if diagnostic.code.startswith("E") else typer.colors.YELLOW
            typer.secho(
                f"{diagnostic.location or diagnostic.class_key}: "
                f"{diagnostic.code} ({diagnostic.symbol}) {diagnostic.message}",
                fg=color,
            )
        for path in report.skipped_files:
            typer.echo(f"{path}: skipped (could not be parsed)")
        typer.echo(self._summary(report))
        if report.diagnostics and self._guidance is not None:
            typer.echo("")
            for code in sorted({d.code for d in report.diagnostics}):
                typer.echo(f"{code}: {self._guidance.get_manual_instructions(code)}")

    def _summary(self, report: "HierarchyReport") -> str:
        return (
            f"Checked {report.classes_checked} classes in {report.files_checked} files: "
            f"{len(report.diagnostics)} diagnostics."
        )
