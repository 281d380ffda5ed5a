"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import sys

import typer

from solid_base_linter.domain.exceptions import ConfigurationError
from solid_base_linter.infrastructure.di.container import SolidBaseContainer
from solid_base_linter.interface.cli import EXIT_USAGE, CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    try:
        container = SolidBaseContainer()
    except ConfigurationError as exc:
        typer.secho(f"[SOLID-BASE] ERROR: {exc}", fg=typer.colors.RED, err=True)
        sys.exit(EXIT_USAGE)

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        astroid_gateway=container.get_astroid_gateway(),
        filesystem=container.get_filesystem_gateway(),
        guidance_service=container.get_guidance_service(),
        reporter=container.get_reporter(),
        analyzer_factory=container.create_analyzer,
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
