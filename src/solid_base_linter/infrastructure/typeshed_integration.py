
import ast
import logging
from collections.abc import Iterable
from typing import Optional

from typeshed_client import finder

from solid_base_linter.domain.constants import DEFAULT_MARKER_DECORATORS, DEFAULT_TYPESHED_MODULES
from solid_base_linter.domain.protocols import FixedLayoutSourceProtocol

logger = logging.getLogger(__name__)


def _decorator_name(dec: ast.expr) -> Optional[str]:
    """Map a stub decorator node to its bare name (disjoint_base, typing.final -> final)."""
    if isinstance(dec, ast.Call):
        dec = dec.func
    if isinstance(dec, ast.Name):
        return dec.id
    if isinstance(dec, ast.Attribute):
        return dec.attr
    return None


class TypeshedSolidBaseSource(FixedLayoutSourceProtocol):
    """
    Fixed-layout data source backed by typeshed stubs via typeshed-client.

    Stub authors mark builtins whose instance layout is fixed with
    @disjoint_base; every such top-level class in the scanned modules is
    reported as solid. Results are computed once per instance.
    """

    def __init__(
        self,
        modules: Iterable[str] = DEFAULT_TYPESHED_MODULES,
        marker_decorators: Iterable[str] = DEFAULT_MARKER_DECORATORS,
    ) -> None:
        self._modules = tuple(modules)
        self._markers = frozenset(marker_decorators)
        self._solid: Optional[frozenset[str]] = None

    def solid_classes(self) -> frozenset[str]:
        if self._solid is None:
            found: set[str] = set()
            for module_name in self._modules:
                found.update(self._scan_module(module_name))
            self._solid = frozenset(found)
        return self._solid

    def _scan_module(self, module_name: str) -> set[str]:
        tree = self._load_stub(module_name)
        if tree is None:
            return set()
        return {
            f"{module_name}.{qualname}"
            for qualname in _find_marked_classes(tree.body, "", self._markers)
        }

    def _load_stub(self, module_name: str) -> Optional[ast.Module]:
        try:
            stub = finder.get_stub_file(module_name)
        except (ImportError, ValueError) as exc:
            logger.warning("typeshed lookup failed for %s: %s", module_name, exc)
            return None
        if not stub:
            logger.warning("No typeshed stub found for %s", module_name)
            return None
        try:
            with open(str(stub), encoding="utf-8") as f:
                return ast.parse(f.read())
        except (OSError, SyntaxError) as exc:
            logger.warning("Could not read typeshed stub %s: %s", stub, exc)
            return None


def _find_marked_classes(body: list[ast.stmt], prefix: str, markers: frozenset[str]) -> list[str]:
    """Qualified names of marked classes, descending into version-guarded if blocks."""
    out: list[str] = []
    for stmt in body:
        if isinstance(stmt, ast.ClassDef):
            qualname = f"{prefix}{stmt.name}"
            if any(_decorator_name(d) in markers for d in stmt.decorator_list):
                out.append(qualname)
            out.extend(_find_marked_classes(stmt.body, f"{qualname}.", markers))
        elif isinstance(stmt, ast.If):
            out.extend(_find_marked_classes(stmt.body, prefix, markers))
            out.extend(_find_marked_classes(stmt.orelse, prefix, markers))
    return out


class CombinedFixedLayoutSource(FixedLayoutSourceProtocol):
    """Union of a static set and any number of pluggable sources."""

    def __init__(self, static: Iterable[str], sources: Iterable[FixedLayoutSourceProtocol] = ()) -> None:
        self._static = frozenset(static)
        self._sources = tuple(sources)

    def solid_classes(self) -> frozenset[str]:
        result = set(self._static)
        for source in self._sources:
            result.update(source.solid_classes())
        return frozenset(result)
