"""Instance layout checks (E9801, W9802, E9803, W9804)."""

from collections.abc import Callable
from typing import TYPE_CHECKING

import astroid  # type: ignore[import-untyped]
from pylint.checkers import BaseChecker

from solid_base_linter.domain.analyzer import SolidBaseAnalyzer
from solid_base_linter.domain.rule_catalog import pylint_msgs
from solid_base_linter.domain.rules.solid_base import SolidBaseRule

if TYPE_CHECKING:
    from pylint.lint import PyLinter

    from solid_base_linter.domain.protocols import AstroidProtocol, GuidanceServiceProtocol


class SolidBaseChecker(BaseChecker):
    """
    E9801: Instance layout conflict. W9802: Inherited layout conflict.
    E9803: Solid base resolution cycle. W9804: Ineligible solid base marker.
    Thin: delegates to SolidBaseRule.
    """

    name: str = "solid-base"
    CODES = list(SolidBaseRule.CODES)

    def __init__(
        self,
        linter: "PyLinter",
        guidance: "GuidanceServiceProtocol",
        ast_gateway: "AstroidProtocol",
        analyzer_factory: Callable[[], SolidBaseAnalyzer] = SolidBaseAnalyzer,
    ) -> None:
        self.msgs = pylint_msgs(self.CODES, guidance.get_display_name)
        super().__init__(linter)
        self._analyzer_factory = analyzer_factory
        self._rule = SolidBaseRule(analyzer_factory(), ast_gateway)

    def open(self) -> None:
        """Start a session: every lint run gets its own hierarchy."""
        self._rule.reset(self._analyzer_factory())

    def visit_classdef(self, node: astroid.nodes.ClassDef) -> None:
        for v in self._rule.check(node):
            self.add_message(
                v.code,
                node=v.node,
                args=v.message_args or (),
            )
