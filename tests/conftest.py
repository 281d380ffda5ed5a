"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on sys.path so tests can import tests.* helpers.
"""

import logging

import pytest

from solid_base_linter.infrastructure.di.container import SolidBaseContainer


@pytest.fixture(autouse=True)
def _isolate_package_logging():
    """CLI runs attach a stderr handler to the package logger; drop it between tests."""
    package_logger = logging.getLogger("solid_base_linter")
    handlers, level = list(package_logger.handlers), package_logger.level
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)


@pytest.fixture(autouse=True)
def _reset_container():
    yield
    SolidBaseContainer.reset()
