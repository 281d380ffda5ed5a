import logging
import unittest
from unittest.mock import MagicMock, patch

from solid_base_linter.infrastructure.typeshed_integration import (
    CombinedFixedLayoutSource,
    TypeshedSolidBaseSource,
)

BUILTINS_STUB = '''
import sys
from typing_extensions import disjoint_base

@disjoint_base
class int:
    @disjoint_base
    class Nested: ...

class object: ...

if sys.version_info >= (3, 10):
    @disjoint_base
    class slice: ...
else:
    @typing_extensions.disjoint_base
    class ellipsis: ...

@final
class bool(int): ...
'''


class TestTypeshedSolidBaseSource(unittest.TestCase):
    def setUp(self):
        self.tmp = self._write_stub()

    def _write_stub(self):
        import tempfile
        from pathlib import Path

        directory = tempfile.mkdtemp()
        path = Path(directory) / "builtins.pyi"
        path.write_text(BUILTINS_STUB, encoding="utf-8")
        return path

    @patch("solid_base_linter.infrastructure.typeshed_integration.finder")
    def test_marked_classes_are_solid(self, mock_finder):
        mock_finder.get_stub_file.return_value = self.tmp
        source = TypeshedSolidBaseSource(modules=("builtins",))
        self.assertEqual(
            source.solid_classes(),
            frozenset({"builtins.int", "builtins.int.Nested", "builtins.slice", "builtins.ellipsis"}),
        )
        mock_finder.get_stub_file.assert_called_with("builtins")

    @patch("solid_base_linter.infrastructure.typeshed_integration.finder")
    def test_scan_happens_once(self, mock_finder):
        mock_finder.get_stub_file.return_value = self.tmp
        source = TypeshedSolidBaseSource(modules=("builtins",))
        source.solid_classes()
        source.solid_classes()
        self.assertEqual(mock_finder.get_stub_file.call_count, 1)

    @patch("solid_base_linter.infrastructure.typeshed_integration.finder")
    def test_custom_markers(self, mock_finder):
        mock_finder.get_stub_file.return_value = self.tmp
        source = TypeshedSolidBaseSource(modules=("builtins",), marker_decorators={"final"})
        self.assertEqual(source.solid_classes(), frozenset({"builtins.bool"}))

    @patch("solid_base_linter.infrastructure.typeshed_integration.finder")
    def test_missing_stub_warns(self, mock_finder):
        mock_finder.get_stub_file.return_value = None
        source = TypeshedSolidBaseSource(modules=("nowhere",))
        with self.assertLogs("solid_base_linter.infrastructure.typeshed_integration", level=logging.WARNING):
            self.assertEqual(source.solid_classes(), frozenset())

    @patch("solid_base_linter.infrastructure.typeshed_integration.finder")
    def test_lookup_error_warns(self, mock_finder):
        mock_finder.get_stub_file.side_effect = ValueError("bad module")
        source = TypeshedSolidBaseSource(modules=("",))
        with self.assertLogs("solid_base_linter.infrastructure.typeshed_integration", level=logging.WARNING):
            self.assertEqual(source.solid_classes(), frozenset())

    @patch("solid_base_linter.infrastructure.typeshed_integration.finder")
    def test_unparsable_stub_warns(self, mock_finder):
        self.tmp.write_text("class (:\n", encoding="utf-8")
        mock_finder.get_stub_file.return_value = self.tmp
        source = TypeshedSolidBaseSource(modules=("builtins",))
        with self.assertLogs("solid_base_linter.infrastructure.typeshed_integration", level=logging.WARNING):
            self.assertEqual(source.solid_classes(), frozenset())


class TestCombinedFixedLayoutSource(unittest.TestCase):
    def test_union_of_static_and_sources(self):
        dynamic = MagicMock()
        dynamic.solid_classes.return_value = frozenset({"builtins.slice"})
        combined = CombinedFixedLayoutSource({"builtins.int"}, [dynamic])
        self.assertEqual(combined.solid_classes(), frozenset({"builtins.int", "builtins.slice"}))

    def test_static_only(self):
        self.assertEqual(CombinedFixedLayoutSource(["a.B"]).solid_classes(), frozenset({"a.B"}))
