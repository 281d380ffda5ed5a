"""CLI entry points for solid-base - Thin Controller using Typer."""

import json
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import typer

from solid_base_linter.domain.analyzer import SolidBaseAnalyzer
from solid_base_linter.domain.config import ConfigurationLoader
from solid_base_linter.domain.constants import SOLID_BASE_BANNER
from solid_base_linter.domain.exceptions import UnknownClassError
from solid_base_linter.domain.protocols import (
    AstroidProtocol,
    FileSystemProtocol,
    GuidanceServiceProtocol,
    TelemetryPort,
)
from solid_base_linter.interface.reporters import HierarchyReporter
from solid_base_linter.use_cases.analyze_hierarchy import AnalyzeHierarchyUseCase

EXIT_OK = 0
EXIT_DIAGNOSTICS = 1
EXIT_USAGE = 2


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    astroid_gateway: AstroidProtocol
    filesystem: FileSystemProtocol
    guidance_service: GuidanceServiceProtocol
    reporter: HierarchyReporter
    analyzer_factory: Callable[[], SolidBaseAnalyzer]


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_path(path: Path | None) -> str:
        """Resolve target path: explicit path, else src/ if exists, else '.' (public API)."""
        if path and str(path) != ".":
            return str(path)
        cwd = Path.cwd()
        src_dir = cwd / "src"
        if src_dir.exists() and src_dir.is_dir():
            return "src"
        return "."

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        """Route package log records to stderr: WARNING by default, DEBUG with --verbose."""
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        root = logging.getLogger("solid_base_linter")
        root.setLevel(logging.DEBUG if verbose else logging.WARNING)
        root.handlers = [handler]

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies. No Service Locator."""
        app = typer.Typer(
            name="solid-base",
            help="solid-base: detect instance layout conflicts between solid bases in a class hierarchy.",
            add_completion=False,
        )

        def _use_case() -> AnalyzeHierarchyUseCase:
            return AnalyzeHierarchyUseCase(
                analyzer_factory=deps.analyzer_factory,
                ast_gateway=deps.astroid_gateway,
                filesystem=deps.filesystem,
                telemetry=deps.telemetry,
                config_loader=deps.config_loader,
            )

        def _require_path(target_path: str) -> None:
            if not deps.filesystem.exists(target_path):
                deps.telemetry.error(f"Path not found: {target_path}")
                sys.exit(EXIT_USAGE)

        @app.command()
        def check(
            path: Path | None = typer.Argument(None, help="Path to analyze (default: src/ if present, else .)"),  # noqa: B008, RUF100
            format: str = typer.Option("text", "--format", "-f", help="Output format: text or json"),
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Log analysis details to stderr"),
        ) -> None:
            """Report every class whose bases cannot share an instance layout."""
            CLIAppFactory.configure_logging(verbose)
            if format not in ("text", "json"):
                deps.telemetry.error(f"Unknown format '{format}'. Use text or json.")
                sys.exit(EXIT_USAGE)
            target_path = CLIAppFactory.resolve_target_path(path)
            _require_path(target_path)
            if format == "text":
                typer.echo(SOLID_BASE_BANNER, err=True)
                deps.telemetry.handshake()
            report = _use_case().execute(target_path)
            deps.reporter.report(report, format=format)
            sys.exit(EXIT_DIAGNOSTICS if report.has_diagnostics() else EXIT_OK)

        @app.command()
        def resolve(
            path: Path = typer.Argument(..., help="Path to analyze"),  # noqa: B008, RUF100
            qname: str = typer.Argument(..., help="Qualified class name, e.g. pkg.mod.Class"),
            json_output: bool = typer.Option(False, "--json", help="Print the result as JSON"),
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Log analysis details to stderr"),
        ) -> None:
            """Print the solid base of QNAME, or why it has none."""
            CLIAppFactory.configure_logging(verbose)
            _require_path(str(path))
            try:
                result = _use_case().resolve(str(path), qname)
            except UnknownClassError as exc:
                deps.telemetry.error(str(exc))
                sys.exit(EXIT_USAGE)
            if json_output:
                typer.echo(json.dumps(result.to_dict(), indent=2))
            elif result.is_resolved:
                typer.echo(f"{qname} -> {result.solid_base}")
            else:
                reason = result.reason.value if result.reason else "invalid"
                detail = ", ".join(result.candidates) or result.invalid_base or ""
                typer.echo(f"{qname} -> invalid ({reason}){': ' + detail if detail else ''}")
            sys.exit(EXIT_OK if result.is_resolved else EXIT_DIAGNOSTICS)

        @app.command()
        def overlaps(
            path: Path = typer.Argument(..., help="Path to analyze"),  # noqa: B008, RUF100
            first: str = typer.Argument(..., help="Qualified name of the first class"),
            second: str = typer.Argument(..., help="Qualified name of the second class"),
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Log analysis details to stderr"),
        ) -> None:
            """Print whether FIRST and SECOND can share an instance: overlap, disjoint or unknown."""
            CLIAppFactory.configure_logging(verbose)
            _require_path(str(path))
            try:
                verdict = _use_case().overlaps(str(path), first, second)
            except UnknownClassError as exc:
                deps.telemetry.error(str(exc))
                sys.exit(EXIT_USAGE)
            typer.echo(verdict.value)
            sys.exit(EXIT_OK)

        @app.command()
        def explain(
            rule_code: str = typer.Argument(..., help="Rule code or symbol, e.g. E9801"),
        ) -> None:
            """Print the manual instructions for a rule."""
            typer.echo(deps.guidance_service.get_manual_instructions(rule_code))

        return app
