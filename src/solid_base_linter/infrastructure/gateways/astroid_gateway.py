import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Optional

import astroid  # type: ignore[import-untyped]

from solid_base_linter.domain.constants import (
    DEFAULT_MARKER_DECORATORS,
    LAYOUT_NEUTRAL_SLOTS,
    STRUCTURAL_BASES,
)
from solid_base_linter.domain.entities import ClassNode
from solid_base_linter.domain.protocols import AstroidProtocol

logger = logging.getLogger(__name__)

_SEQUENCE_NODES = (astroid.nodes.Tuple, astroid.nodes.List, astroid.nodes.Set)
# Annotations in a dataclass body that do not become fields.
_NON_FIELD_ANNOTATIONS = frozenset({"ClassVar", "InitVar", "KW_ONLY"})


class AstroidGateway(AstroidProtocol):
    """Declaration extraction: astroid ClassDef -> ClassNode, plus hierarchy registration."""

    def __init__(self, marker_decorators: Iterable[str] = DEFAULT_MARKER_DECORATORS) -> None:
        self._marker_decorators = frozenset(marker_decorators)

    def parse_file(self, file_path: str, module_name: str = "") -> Optional[astroid.nodes.Module]:
        """Parse a file and return the astroid Module node, or None when it cannot be built.

        Going through the manager caches the module under module_name, so
        imports between analyzed files resolve to the same ClassDef nodes.
        """
        try:
            return astroid.MANAGER.ast_from_file(file_path, modname=module_name or None, source=True)
        except astroid.AstroidBuildingError as exc:
            logger.warning("Could not parse %s: %s", file_path, exc)
            return None

    def iter_class_defs(self, module: astroid.nodes.Module) -> Iterator[astroid.nodes.ClassDef]:
        yield from module.nodes_of_class(astroid.nodes.ClassDef)

    # --------------------------------------------------------------------- #
    # Hierarchy registration
    # --------------------------------------------------------------------- #

    def register_class(
        self, node: astroid.nodes.ClassDef, register: Callable[[ClassNode], object]
    ) -> str:
        """Register node after all of its inferred ancestors (bases before dependents)."""
        self._register_recursive(node, register, set())
        return str(node.qname())

    def _register_recursive(
        self,
        node: astroid.nodes.ClassDef,
        register: Callable[[ClassNode], object],
        visiting: set[str],
    ) -> None:
        key = str(node.qname())
        if key in visiting:
            return
        visiting.add(key)
        for base in self._direct_base_defs(node):
            self._register_recursive(base, register, visiting)
        register(self.class_node_from_def(node))

    def _direct_base_defs(self, node: astroid.nodes.ClassDef) -> list[astroid.nodes.ClassDef]:
        """Inferred direct bases in declared order. Uninferable bases are dropped."""
        try:
            return list(node.ancestors(recurs=False))
        except astroid.InferenceError:
            logger.debug("Could not infer bases of %s", node.qname())
            return []

    # --------------------------------------------------------------------- #
    # Declaration extraction
    # --------------------------------------------------------------------- #

    def class_node_from_def(self, node: astroid.nodes.ClassDef) -> ClassNode:
        bases = tuple(str(base.qname()) for base in self._direct_base_defs(node))
        marker = self.find_marker_decorator(node)
        slots = self.own_slot_names(node) + self.dataclass_slot_fields(node)
        structural_kind = self.structural_kind(node)
        return ClassNode(
            key=str(node.qname()),
            bases=bases,
            marked_solid=marker is not None,
            has_slot_layout=any(name not in LAYOUT_NEUTRAL_SLOTS for name in slots),
            is_structural=structural_kind is not None,
            structural_kind=structural_kind,
            marker_name=marker,
            location=self.location_of(node),
        )

    def location_of(self, node: astroid.nodes.NodeNG) -> str:
        root = node.root()
        path = getattr(root, "file", "") or getattr(root, "name", "")
        return f"{path}:{getattr(node, 'lineno', 0)}:{getattr(node, 'col_offset', 0)}"

    def find_marker_decorator(self, node: astroid.nodes.ClassDef) -> Optional[str]:
        """Return the marker decorator name applied to node, if any."""
        if not node.decorators:
            return None
        for dec in node.decorators.nodes:
            name = self._decorator_name(dec)
            if name in self._marker_decorators:
                return name
        return None

    def _decorator_name(self, dec: astroid.nodes.NodeNG) -> Optional[str]:
        if isinstance(dec, astroid.nodes.Call):
            dec = dec.func
        if isinstance(dec, astroid.nodes.Name):
            return str(dec.name)
        if isinstance(dec, astroid.nodes.Attribute):
            return str(dec.attrname)
        return None

    def own_slot_names(self, node: astroid.nodes.ClassDef) -> tuple[str, ...]:
        """Names declared in the class's own __slots__ (inherited slots excluded)."""
        for stmt in node.body:
            if isinstance(stmt, astroid.nodes.Assign):
                targets = [t for t in stmt.targets if isinstance(t, astroid.nodes.AssignName)]
            elif isinstance(stmt, astroid.nodes.AnnAssign) and isinstance(
                stmt.target, astroid.nodes.AssignName
            ):
                targets = [stmt.target]
            else:
                continue
            if any(t.name == "__slots__" for t in targets):
                return self._slot_names_from_value(stmt.value, infer=True)
        return ()

    def dataclass_slot_fields(self, node: astroid.nodes.ClassDef) -> tuple[str, ...]:
        """Own fields that @dataclass(slots=True) turns into __slots__ entries."""
        if not self._has_slots_dataclass_decorator(node):
            return ()
        return tuple(
            stmt.target.name
            for stmt in node.body
            if isinstance(stmt, astroid.nodes.AnnAssign)
            and isinstance(stmt.target, astroid.nodes.AssignName)
            and self._annotation_name(stmt.annotation) not in _NON_FIELD_ANNOTATIONS
        )

    def _has_slots_dataclass_decorator(self, node: astroid.nodes.ClassDef) -> bool:
        if not node.decorators:
            return False
        for dec in node.decorators.nodes:
            if not isinstance(dec, astroid.nodes.Call) or self._decorator_name(dec) != "dataclass":
                continue
            for keyword in dec.keywords or ():
                if (
                    keyword.arg == "slots"
                    and isinstance(keyword.value, astroid.nodes.Const)
                    and keyword.value.value is True
                ):
                    return True
        return False

    def _annotation_name(self, annotation: astroid.nodes.NodeNG) -> Optional[str]:
        if isinstance(annotation, astroid.nodes.Subscript):
            annotation = annotation.value
        if isinstance(annotation, astroid.nodes.Name):
            return str(annotation.name)
        if isinstance(annotation, astroid.nodes.Attribute):
            return str(annotation.attrname)
        return None

    def _slot_names_from_value(
        self, value: Optional[astroid.nodes.NodeNG], infer: bool
    ) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, astroid.nodes.Const):
            return (value.value,) if isinstance(value.value, str) else ()
        if isinstance(value, _SEQUENCE_NODES):
            return tuple(name for elt in value.elts for name in self._slot_names_from_value(elt, infer))
        if isinstance(value, astroid.nodes.Dict):
            return tuple(
                name for key, _ in value.items for name in self._slot_names_from_value(key, infer)
            )
        if not infer:
            return ()
        try:
            inferred = next(value.infer())
        except (astroid.InferenceError, StopIteration):
            logger.debug("Uninferable __slots__ value at line %s", getattr(value, "lineno", "?"))
            return ()
        if inferred is astroid.Uninferable:
            return ()
        return self._slot_names_from_value(inferred, infer=False)

    def structural_kind(self, node: astroid.nodes.ClassDef) -> Optional[str]:
        """'Protocol' or 'TypedDict' when node is a structural type, else None.

        Only classes listing Protocol directly are protocols; any subclass of a
        TypedDict is itself a TypedDict.
        """
        for base in node.bases:
            kind = self._structural_name(base)
            if kind is not None:
                return kind
        for base_def in self._direct_base_defs(node):
            kind = STRUCTURAL_BASES.get(str(base_def.qname()))
            if kind == "Protocol":
                return kind
            if kind == "TypedDict" or self._is_typeddict_def(base_def, set()):
                return "TypedDict"
        return None

    def _structural_name(self, base: astroid.nodes.NodeNG) -> Optional[str]:
        if isinstance(base, astroid.nodes.Subscript):
            base = base.value
        name = None
        if isinstance(base, astroid.nodes.Name):
            name = base.name
        elif isinstance(base, astroid.nodes.Attribute):
            name = base.attrname
        if name in ("Protocol", "TypedDict"):
            return str(name)
        return None

    def _is_typeddict_def(self, node: astroid.nodes.ClassDef, seen: set[str]) -> bool:
        key = str(node.qname())
        if key in seen:
            return False
        seen.add(key)
        if STRUCTURAL_BASES.get(key) == "TypedDict":
            return True
        if any(self._structural_name(b) == "TypedDict" for b in node.bases):
            return True
        return any(self._is_typeddict_def(b, seen) for b in self._direct_base_defs(node))
