"""ClassValidator: turn resolver failures into class-level diagnostics."""

from solid_base_linter.domain.entities import ClassNode, Diagnostic, InvalidReason, SolidBaseResult
from solid_base_linter.domain.protocols import ClassHierarchyProtocol
from solid_base_linter.domain.resolver import SolidBaseResolver
from solid_base_linter.domain.rule_catalog import (
    INELIGIBLE_MARKER,
    INHERITED_CONFLICT,
    LAYOUT_CONFLICT,
    RESOLUTION_CYCLE,
    RuleSpec,
)
from solid_base_linter.domain.solidness import SolidnessOracle


class ClassValidator:
    """
    Invoked at class-definition time. Produces zero or one diagnostic per class
    and never raises for an invalid class, so analysis continues.
    """

    def __init__(
        self,
        hierarchy: ClassHierarchyProtocol,
        oracle: SolidnessOracle,
        resolver: SolidBaseResolver,
    ) -> None:
        self._hierarchy = hierarchy
        self._oracle = oracle
        self._resolver = resolver

    def validate(self, key: str) -> list[Diagnostic]:
        node = self._hierarchy.node(key)
        if node.is_structural and node.marked_solid:
            return [self._ineligible_marker(node)]

        result = self._resolver.solid_base_of(key)
        if result.is_invalid:
            return [self._diagnostic_for(node, result)]

        # A solid class resolves to itself, so its bases are checked separately.
        if self._oracle.is_intrinsically_solid(key) and node.bases:
            from_bases = self._resolver.resolve_bases(key)
            if from_bases.is_invalid:
                return [self._diagnostic_for(node, from_bases)]
        return []

    def _diagnostic_for(self, node: ClassNode, result: SolidBaseResult) -> Diagnostic:
        if result.reason is InvalidReason.CYCLE:
            return self._build(node, RESOLUTION_CYCLE, (node.name,), result.candidates)
        if result.reason is InvalidReason.INVALID_BASE:
            base = result.invalid_base or "?"
            return self._build(node, INHERITED_CONFLICT, (node.name, base), result.candidates)
        rendered = ", ".join(result.candidates)
        return self._build(node, LAYOUT_CONFLICT, (node.name, rendered), result.candidates)

    def _ineligible_marker(self, node: ClassNode) -> Diagnostic:
        kind = node.structural_kind or "structural type"
        marker = node.marker_name or "solid base marker"
        return self._build(node, INELIGIBLE_MARKER, (node.name, kind, marker))

    def _build(
        self,
        node: ClassNode,
        rule: RuleSpec,
        args: tuple[str, ...],
        candidates: tuple[str, ...] = (),
    ) -> Diagnostic:
        return Diagnostic(
            code=rule.code,
            symbol=rule.symbol,
            class_key=node.key,
            message=rule.render(args),
            args=args,
            candidates=candidates,
            location=node.location,
        )
