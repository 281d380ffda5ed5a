"""Terminal telemetry for CLI sessions."""

import typer

from solid_base_linter.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Status lines on stderr so stdout stays clean for --format json."""

    def __init__(self, project_name: str, color: str = "cyan", welcome_msg: str = "") -> None:
        self.project_name = project_name
        self.color = color
        self.welcome_msg = welcome_msg

    def handshake(self) -> None:
        typer.secho(
            f"[{self.project_name}] {self.welcome_msg}".rstrip(),
            fg=self.color,
            bold=True,
            err=True,
        )

    def step(self, message: str) -> None:
        typer.secho(f"[{self.project_name}] {message}", fg=self.color, err=True)

    def warning(self, message: str) -> None:
        typer.secho(f"[{self.project_name}] WARNING: {message}", fg=typer.colors.YELLOW, err=True)

    def error(self, message: str) -> None:
        typer.secho(f"[{self.project_name}] ERROR: {message}", fg=typer.colors.RED, err=True)
