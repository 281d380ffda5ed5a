from typing import TYPE_CHECKING, Any, Optional, cast

from solid_base_linter.domain.analyzer import SolidBaseAnalyzer
from solid_base_linter.domain.config import ConfigurationLoader
from solid_base_linter.domain.hierarchy import ClassHierarchy
from solid_base_linter.infrastructure.config_file_loader import ConfigFileLoader
from solid_base_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from solid_base_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from solid_base_linter.infrastructure.services.guidance_service import GuidanceService
from solid_base_linter.infrastructure.typeshed_integration import (
    CombinedFixedLayoutSource,
    TypeshedSolidBaseSource,
)
from solid_base_linter.interface.reporters import TerminalHierarchyReporter
from solid_base_linter.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from solid_base_linter.domain.protocols import (
        AstroidProtocol,
        FileSystemProtocol,
        FixedLayoutSourceProtocol,
        TelemetryPort,
    )
    from solid_base_linter.interface.reporters import HierarchyReporter


class SolidBaseContainer:
    """Dependency Injection Container for the solid base linter."""

    _instance: Optional["SolidBaseContainer"] = None

    def __init__(self, config_loader: Optional[ConfigurationLoader] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_loader)

    def _register_defaults(self, config_loader: Optional[ConfigurationLoader]) -> None:
        """Register default implementations for protocols."""
        if config_loader is None:
            config_dict, tool_section = ConfigFileLoader.load_config_from_fs()
            config_loader = ConfigurationLoader(config_dict, tool_section)
        self.register_singleton("ConfigurationLoader", config_loader)

        telemetry = ProjectTelemetry("SOLID-BASE", "cyan", "Layout Inspector Online")
        self.register_singleton("TelemetryPort", telemetry)
        self.register_singleton(
            "AstroidGateway", AstroidGateway(config_loader.marker_decorators)
        )
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        guidance_service = GuidanceService()
        self.register_singleton("GuidanceService", guidance_service)

        # Fixed-layout builtins: configured defaults plus @disjoint_base classes in typeshed
        sources = []
        if config_loader.use_typeshed:
            sources.append(
                TypeshedSolidBaseSource(
                    modules=config_loader.typeshed_modules,
                    marker_decorators=config_loader.marker_decorators,
                )
            )
        self.register_singleton(
            "FixedLayoutSource",
            CombinedFixedLayoutSource(config_loader.solid_builtins, sources),
        )

        self.register_singleton("HierarchyReporter", TerminalHierarchyReporter(guidance_service))

    # JUSTIFICATION: DI Container must handle any type of service
    def register_singleton(self, key: str, instance: Any) -> None:  # pylint: disable=banned-any-usage
        """Register a singleton instance."""
        self._singletons[key] = instance

    # JUSTIFICATION: DI Container must return any type of service
    def get(self, key: str) -> Any:  # pylint: disable=banned-any-usage
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_astroid_gateway(self) -> "AstroidProtocol":
        """Return the Astroid gateway."""
        return cast("AstroidProtocol", self.get("AstroidGateway"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_guidance_service(self) -> GuidanceService:
        """Return the guidance service (rule registry)."""
        return cast(GuidanceService, self.get("GuidanceService"))

    def get_fixed_layout_source(self) -> "FixedLayoutSourceProtocol":
        return cast("FixedLayoutSourceProtocol", self.get("FixedLayoutSource"))

    def get_reporter(self) -> "HierarchyReporter":
        """Return the hierarchy reporter."""
        return cast("HierarchyReporter", self.get("HierarchyReporter"))

    def create_analyzer(self) -> SolidBaseAnalyzer:
        """Fresh analyzer over an empty hierarchy. One per checking session."""
        config_loader = self.get_config_loader()
        return SolidBaseAnalyzer(
            ClassHierarchy(config_loader.universal_root),
            self.get_fixed_layout_source().solid_classes(),
        )

    @classmethod
    def get_instance(cls) -> "SolidBaseContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = SolidBaseContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
