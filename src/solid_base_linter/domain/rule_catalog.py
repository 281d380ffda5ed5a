"""
Code, symbol and message template of every solid base diagnostic.

Diagnostics and the pylint msgs table both render from RULES. The packaged
rule registry only carries the human guidance (display names, manual fixes).
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RuleSpec:
    code: str
    symbol: str
    template: str

    def render(self, args: tuple[str, ...]) -> str:
        """Fill the %-style template the same way pylint does for add_message(args=...)."""
        return self.template % args


LAYOUT_CONFLICT = RuleSpec(
    "E9801",
    "instance-layout-conflict",
    "Class '%s' has incompatible solid bases: %s.",
)
INHERITED_CONFLICT = RuleSpec(
    "W9802",
    "inherited-layout-conflict",
    "Class '%s' inherits from '%s', which has no valid solid base.",
)
RESOLUTION_CYCLE = RuleSpec(
    "E9803",
    "solid-base-resolution-cycle",
    "Internal error: cyclic class hierarchy while resolving the solid base of '%s'.",
)
INELIGIBLE_MARKER = RuleSpec(
    "W9804",
    "ineligible-solid-base-marker",
    "'%s' is a %s and cannot be decorated with @%s.",
)

RULES: dict[str, RuleSpec] = {
    spec.code: spec
    for spec in (LAYOUT_CONFLICT, INHERITED_CONFLICT, RESOLUTION_CYCLE, INELIGIBLE_MARKER)
}


def find_rule(code_or_symbol: str) -> Optional[RuleSpec]:
    """Look a rule up by message id (E9801) or symbol (instance-layout-conflict)."""
    spec = RULES.get(code_or_symbol)
    if spec is not None:
        return spec
    return next((s for s in RULES.values() if s.symbol == code_or_symbol), None)


def pylint_msgs(
    codes: Iterable[str], describe: Callable[[str], str]
) -> dict[str, tuple[str, str, str]]:
    """Build a checker msgs table {code: (template, symbol, description)}."""
    return {
        code: (RULES[code].template, RULES[code].symbol, describe(code))
        for code in codes
    }
