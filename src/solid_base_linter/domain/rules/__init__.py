"""Domain models for rules and violations."""

from dataclasses import dataclass

__all__ = [
    "Checkable",
    "Violation",
]

from typing import Protocol

import astroid


@dataclass(frozen=True)
class Violation:
    """A rule violation bound to the astroid node it is reported on."""

    code: str
    node: astroid.nodes.NodeNG
    message_args: tuple[str, ...] | None = None
    """Args for Pylint add_message, filling the rule's message template."""


class Checkable(Protocol):
    """One-and-done check: given a node, return violations."""

    code: str
    description: str

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        """Interrogate a node for a layout breach."""
        ...
