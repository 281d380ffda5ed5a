"""Solid base rules (E9801, W9802, E9803, W9804) - class definition layout validation."""

import logging
from typing import TYPE_CHECKING

import astroid

from solid_base_linter.domain.exceptions import UnknownClassError
from solid_base_linter.domain.rule_catalog import RULES
from solid_base_linter.domain.rules import Checkable, Violation

if TYPE_CHECKING:
    from solid_base_linter.domain.analyzer import SolidBaseAnalyzer
    from solid_base_linter.domain.protocols import AstroidProtocol

logger = logging.getLogger(__name__)


class SolidBaseRule(Checkable):
    """
    Rule for the E9801/W9802/E9803/W9804 family.

    - Registers the visited class and its inferred ancestors in the session
      hierarchy.
    - Delegates to the ClassValidator and binds each diagnostic to the
      ClassDef it was declared at.
    """

    code: str = "E9801"
    description: str = (
        "Solid bases: a class may inherit from at most one chain of solid bases; "
        "unrelated solid bases cannot share an instance layout."
    )
    CODES: tuple[str, ...] = tuple(RULES)

    def __init__(self, analyzer: "SolidBaseAnalyzer", ast_gateway: "AstroidProtocol") -> None:
        self._analyzer = analyzer
        self._ast_gateway = ast_gateway

    @property
    def analyzer(self) -> "SolidBaseAnalyzer":
        return self._analyzer

    def reset(self, analyzer: "SolidBaseAnalyzer") -> None:
        """Start a new checking session with a fresh hierarchy snapshot."""
        self._analyzer = analyzer

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        if not isinstance(node, astroid.nodes.ClassDef):
            return []
        key = self._ast_gateway.register_class(node, self._analyzer.register)
        try:
            diagnostics = self._analyzer.validate(key)
        except UnknownClassError as exc:
            logger.warning("Skipping '%s': %s", key, exc)
            return []
        return [
            Violation(code=d.code, node=node, message_args=d.args)
            for d in diagnostics
        ]
