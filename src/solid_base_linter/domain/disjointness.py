"""DisjointnessOracle: can two nominal classes ever share a common instance?"""

from solid_base_linter.domain.entities import OverlapVerdict
from solid_base_linter.domain.protocols import ClassHierarchyProtocol
from solid_base_linter.domain.resolver import SolidBaseResolver


class DisjointnessOracle:
    """
    Supplies only the solid-base-layout dimension of disjointness.

    Two classes whose solid bases are incomparable in the subclass order can
    have no common instance. Comparable solid bases mean "may overlap"; callers
    combine this with other signals (finality, structural checks). A class
    with no valid solid base yields UNKNOWN, which callers must treat as
    "may overlap".
    """

    def __init__(self, hierarchy: ClassHierarchyProtocol, resolver: SolidBaseResolver) -> None:
        self._hierarchy = hierarchy
        self._resolver = resolver

    def verdict(self, a: str, b: str) -> OverlapVerdict:
        sa = self._resolver.solid_base_of(a).solid_base
        sb = self._resolver.solid_base_of(b).solid_base
        if sa is None or sb is None:
            return OverlapVerdict.UNKNOWN
        if sa == sb or self._hierarchy.is_subclass(sa, sb) or self._hierarchy.is_subclass(sb, sa):
            return OverlapVerdict.OVERLAP
        return OverlapVerdict.DISJOINT

    def overlaps(self, a: str, b: str) -> bool:
        return self.verdict(a, b) is not OverlapVerdict.DISJOINT

    def is_disjoint(self, a: str, b: str) -> bool:
        return self.verdict(a, b) is OverlapVerdict.DISJOINT
