"""SolidBaseAnalyzer: one hierarchy snapshot wired to its oracles, cache and validator."""

from collections.abc import Iterable
from typing import Optional

from solid_base_linter.domain.constants import DEFAULT_SOLID_BUILTINS
from solid_base_linter.domain.disjointness import DisjointnessOracle
from solid_base_linter.domain.entities import ClassNode, Diagnostic, OverlapVerdict, SolidBaseResult
from solid_base_linter.domain.hierarchy import ClassHierarchy
from solid_base_linter.domain.resolver import SolidBaseResolver
from solid_base_linter.domain.solid_base_cache import SolidBaseCache
from solid_base_linter.domain.solidness import SolidnessOracle
from solid_base_linter.domain.validator import ClassValidator


class SolidBaseAnalyzer:
    """
    Facade over a single checking session.

    The resolver is the single source of truth; the validator and the
    disjointness oracle are thin consumers of it. The cache is subscribed to
    the hierarchy, so amending a declaration evicts the class and its
    descendants before the next query.
    """

    def __init__(
        self,
        hierarchy: Optional[ClassHierarchy] = None,
        fixed_layout_classes: Iterable[str] = DEFAULT_SOLID_BUILTINS,
    ) -> None:
        self.hierarchy = hierarchy if hierarchy is not None else ClassHierarchy()
        self.cache = SolidBaseCache()
        self.hierarchy.add_invalidation_listener(self.cache.invalidate)
        self.oracle = SolidnessOracle(self.hierarchy, fixed_layout_classes)
        self.resolver = SolidBaseResolver(self.hierarchy, self.oracle, self.cache)
        self.validator = ClassValidator(self.hierarchy, self.oracle, self.resolver)
        self.disjointness = DisjointnessOracle(self.hierarchy, self.resolver)

    def register(self, node: ClassNode) -> bool:
        return self.hierarchy.register(node)

    def register_all(self, nodes: Iterable[ClassNode]) -> None:
        for node in nodes:
            self.hierarchy.register(node)

    def is_intrinsically_solid(self, key: str) -> bool:
        return self.oracle.is_intrinsically_solid(key)

    def solid_base_of(self, key: str) -> SolidBaseResult:
        return self.resolver.solid_base_of(key)

    def validate(self, key: str) -> list[Diagnostic]:
        return self.validator.validate(key)

    def overlaps(self, a: str, b: str) -> bool:
        return self.disjointness.overlaps(a, b)

    def verdict(self, a: str, b: str) -> OverlapVerdict:
        return self.disjointness.verdict(a, b)
