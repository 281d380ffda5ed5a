"""Unit tests for FileSystemGateway."""

from pathlib import Path

from solid_base_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway


class TestFileSystemGateway:
    def test_glob_python_files_is_recursive_and_sorted(self, tmp_path: Path) -> None:
        (tmp_path / "pkg").mkdir()
        (tmp_path / "pkg" / "b.py").write_text("")
        (tmp_path / "pkg" / "a.pyi").write_text("")
        (tmp_path / "top.py").write_text("")
        (tmp_path / "notes.txt").write_text("")
        files = FileSystemGateway().glob_python_files(str(tmp_path))
        assert [Path(f).name for f in files] == ["a.pyi", "b.py", "top.py"]

    def test_glob_single_file(self, tmp_path: Path) -> None:
        path = tmp_path / "mod.py"
        path.write_text("")
        gateway = FileSystemGateway()
        assert gateway.glob_python_files(str(path)) == [str(path.resolve())]
        assert gateway.glob_python_files(str(tmp_path / "notes.txt")) == []

    def test_exists_and_is_directory(self, tmp_path: Path) -> None:
        gateway = FileSystemGateway()
        assert gateway.exists(str(tmp_path))
        assert gateway.is_directory(str(tmp_path))
        assert not gateway.exists(str(tmp_path / "missing"))

    def test_resolve_path(self, tmp_path: Path) -> None:
        assert FileSystemGateway().resolve_path(str(tmp_path / "x" / "..")) == str(tmp_path.resolve())

    def test_module_name_for(self, tmp_path: Path) -> None:
        gateway = FileSystemGateway()
        root = str(tmp_path)
        assert gateway.module_name_for(str(tmp_path / "pkg" / "mod.py"), root) == "pkg.mod"
        assert gateway.module_name_for(str(tmp_path / "pkg" / "__init__.py"), root) == "pkg"
        assert gateway.module_name_for(str(tmp_path / "stub.pyi"), root) == "stub"

    def test_module_name_for_single_file_root(self, tmp_path: Path) -> None:
        path = tmp_path / "single.py"
        path.write_text("")
        assert FileSystemGateway().module_name_for(str(path), str(path)) == "single"

    def test_module_name_for_root_init(self, tmp_path: Path) -> None:
        pkg = tmp_path / "toppkg"
        pkg.mkdir()
        init = pkg / "__init__.py"
        init.write_text("")
        assert FileSystemGateway().module_name_for(str(init), str(pkg)) == "toppkg"
