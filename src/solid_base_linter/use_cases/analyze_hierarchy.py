"""Use Case: Analyze Hierarchy - register every class under a path, then validate or query it."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from solid_base_linter.domain.entities import (
    Diagnostic,
    HierarchyReport,
    OverlapVerdict,
    SolidBaseResult,
)
from solid_base_linter.domain.exceptions import UnknownClassError
from solid_base_linter.domain.protocols import AstroidProtocol, FileSystemProtocol, TelemetryPort

if TYPE_CHECKING:
    from solid_base_linter.domain.analyzer import SolidBaseAnalyzer
    from solid_base_linter.domain.config import ConfigurationLoader

logger = logging.getLogger(__name__)


class AnalyzeHierarchyUseCase:
    """Orchestrate parsing, class registration and validation for a source tree."""

    def __init__(
        self,
        analyzer_factory: Callable[[], "SolidBaseAnalyzer"],
        ast_gateway: AstroidProtocol,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
        config_loader: "ConfigurationLoader",
    ) -> None:
        self.analyzer_factory = analyzer_factory
        self.ast_gateway = ast_gateway
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.config_loader = config_loader
        self.analyzer: "SolidBaseAnalyzer" = analyzer_factory()
        self._declared: list[str] = []
        self._files_checked = 0
        self._skipped: list[str] = []

    def load(self, target_path: str) -> list[str]:
        """
        Parse every Python file under target_path into a fresh hierarchy.

        All files are parsed before any class is registered so that imports
        between analyzed modules resolve to the parsed ClassDefs.

        Returns:
            Keys of the classes declared in the analyzed files, in source order.
        """
        self.analyzer = self.analyzer_factory()
        self._declared = []
        self._files_checked = 0
        self._skipped = []

        root = self.filesystem.resolve_path(target_path)
        modules = []
        for file_path in self.filesystem.glob_python_files(root):
            if self.config_loader.is_excluded(file_path):
                logger.debug("Excluded %s", file_path)
                continue
            module = self.ast_gateway.parse_file(
                file_path, self.filesystem.module_name_for(file_path, root)
            )
            if module is None:
                self._skipped.append(file_path)
                continue
            modules.append(module)
        self._files_checked = len(modules)

        seen: set[str] = set()
        for module in modules:
            for class_def in self.ast_gateway.iter_class_defs(module):
                key = self.ast_gateway.register_class(class_def, self.analyzer.register)
                if key not in seen:
                    seen.add(key)
                    self._declared.append(key)
        return list(self._declared)

    def execute(self, target_path: str) -> HierarchyReport:
        """Validate every class declared under target_path. Never raises for invalid classes."""
        self.telemetry.step(f"Analyzing class hierarchy under: {target_path}")
        keys = self.load(target_path)
        diagnostics: list[Diagnostic] = []
        for key in keys:
            try:
                diagnostics.extend(self.analyzer.validate(key))
            except UnknownClassError as exc:
                logger.warning("Skipping '%s': %s", key, exc)
        for diagnostic in diagnostics:
            if diagnostic.is_internal_error:
                self.telemetry.error(diagnostic.message)
        return HierarchyReport(
            diagnostics=diagnostics,
            classes_checked=len(keys),
            files_checked=self._files_checked,
            skipped_files=list(self._skipped),
        )

    def resolve(self, target_path: str, qname: str) -> SolidBaseResult:
        """Solid base of qname. Raises UnknownClassError if no analyzed file defines it."""
        self.load(target_path)
        return self.analyzer.solid_base_of(qname)

    def overlaps(self, target_path: str, a: str, b: str) -> OverlapVerdict:
        """Three-valued overlap answer for a and b. Raises UnknownClassError for unknown keys."""
        self.load(target_path)
        return self.analyzer.verdict(a, b)
