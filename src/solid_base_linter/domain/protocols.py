from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    import astroid

    from solid_base_linter.domain.entities import ClassNode


class ClassHierarchyProtocol(Protocol):
    """Read side of the class hierarchy consumed by the oracles and resolver."""

    @property
    def root_key(self) -> str:
        """Key of the universal root class."""
        ...

    def node(self, key: str) -> "ClassNode":
        """Return the declaration for key. Raises UnknownClassError."""
        ...

    def direct_bases(self, key: str) -> tuple[str, ...]:
        """Ordered direct bases of key."""
        ...

    def is_subclass(self, sub: str, sup: str) -> bool:
        """Reflexive, transitive subclass test."""
        ...

    def __contains__(self, key: object) -> bool:
        ...


class InvalidationListener(Protocol):
    def __call__(self, keys: frozenset[str]) -> None: ...


class FixedLayoutSourceProtocol(Protocol):
    """Pluggable data source for builtin classes with a fixed instance layout."""

    def solid_classes(self) -> frozenset[str]:
        """Qualified names of classes that are solid bases by construction."""
        ...


class AstroidProtocol(Protocol):
    def parse_file(self, file_path: str, module_name: str = "") -> Optional["astroid.nodes.Module"]:
        """Parse a file under module_name and return the astroid Module node, or None."""
        ...

    def class_node_from_def(self, node: "astroid.nodes.ClassDef") -> "ClassNode":
        """Extract declaration facts from an astroid ClassDef."""
        ...

    def register_class(
        self, node: "astroid.nodes.ClassDef", register: Callable[["ClassNode"], object]
    ) -> str:
        """Register node and all of its inferred ancestors. Returns node's key."""
        ...

    def iter_class_defs(self, module: "astroid.nodes.Module") -> Iterable["astroid.nodes.ClassDef"]:
        """Yield every ClassDef declared in module, nested ones included."""
        ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        ...

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        ...

    def exists(self, path: str) -> bool:
        """Check if path exists."""
        ...

    def glob_python_files(self, path: str) -> list[str]:
        """Get all Python files in path (recursive if directory)."""
        ...

    def module_name_for(self, file_path: str, root: str) -> str:
        """Dotted module name of file_path relative to root."""
        ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class GuidanceServiceProtocol(Protocol):
    """Rule guidance: display names and manual instructions."""

    def get_display_name(self, rule_code: str) -> str:
        ...

    def get_manual_instructions(self, rule_code: str) -> str:
        ...
