"""SolidnessOracle: is a class a solid base by virtue of its own declaration?"""

from collections.abc import Iterable

from solid_base_linter.domain.constants import DEFAULT_SOLID_BUILTINS
from solid_base_linter.domain.protocols import ClassHierarchyProtocol


class SolidnessOracle:
    """
    Pure lookup over a class's declared attributes. No recursion, no failure mode
    beyond an unregistered key.

    A class is intrinsically solid iff it is explicitly marked, has a non-empty
    per-instance slot layout, is the universal root, or belongs to the
    fixed-layout set. Structural classes (Protocol, TypedDict) never are.
    """

    def __init__(
        self,
        hierarchy: ClassHierarchyProtocol,
        fixed_layout_classes: Iterable[str] = DEFAULT_SOLID_BUILTINS,
    ) -> None:
        self._hierarchy = hierarchy
        self._fixed_layout = frozenset(fixed_layout_classes)

    @property
    def fixed_layout_classes(self) -> frozenset[str]:
        return self._fixed_layout

    def is_intrinsically_solid(self, key: str) -> bool:
        node = self._hierarchy.node(key)
        if node.is_root or key == self._hierarchy.root_key:
            return True
        if node.is_structural:
            return False
        return node.marked_solid or node.has_slot_layout or key in self._fixed_layout
