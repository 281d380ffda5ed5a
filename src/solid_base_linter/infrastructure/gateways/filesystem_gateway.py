"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from pathlib import Path

from solid_base_linter.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        return str(Path(path).resolve())

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        return Path(path).is_dir()

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def glob_python_files(self, path: str) -> list[str]:
        """Get all Python and stub files in path (recursive if directory), sorted."""
        path_obj = Path(path).resolve()
        if path_obj.is_dir():
            return sorted(str(p) for p in path_obj.rglob("*") if p.suffix in (".py", ".pyi"))
        return [str(path_obj)] if path_obj.suffix in (".py", ".pyi") else []

    def module_name_for(self, file_path: str, root: str) -> str:
        """Dotted module name of file_path relative to root (package __init__ collapsed)."""
        file_obj = Path(file_path).resolve()
        root_obj = Path(root).resolve()
        if root_obj.is_file():
            root_obj = root_obj.parent
        try:
            parts = list(file_obj.relative_to(root_obj).with_suffix("").parts)
        except ValueError:
            parts = [file_obj.stem]
        if parts and parts[-1] == "__init__":
            parts = parts[:-1] or [file_obj.parent.name]
        return ".".join(parts)
