"""
Pylint plugin entry point.
"""

from pylint.lint import PyLinter

from solid_base_linter.infrastructure.di.container import SolidBaseContainer
from solid_base_linter.use_cases.checks.solid_base import SolidBaseChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = SolidBaseContainer.get_instance()
    linter.register_checker(
        SolidBaseChecker(
            linter,
            guidance=container.get_guidance_service(),
            ast_gateway=container.get_astroid_gateway(),
            analyzer_factory=container.create_analyzer,
        )
    )
