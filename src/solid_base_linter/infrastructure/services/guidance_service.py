"""GuidanceService: loads the rule registry and provides display names and manual_instructions."""

from pathlib import Path
from typing import Any

import yaml

from solid_base_linter.domain.constants import RULE_PREFIX
from solid_base_linter.domain.protocols import GuidanceServiceProtocol
from solid_base_linter.domain.rule_catalog import find_rule


class GuidanceService(GuidanceServiceProtocol):
    """Loads rule_registry.yaml and provides get_display_name / get_manual_instructions."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, dict[str, Any]] = {}
        self._load()

    def _load(self) -> None:
        if self._path.exists():
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
                self._registry = data if isinstance(data, dict) else {}
        else:
            self._registry = {}

    def get_entry(self, rule_code: str) -> dict[str, Any] | None:
        """Return the guidance entry for a rule by code or symbol."""
        rule = find_rule(rule_code)
        code = rule.code if rule is not None else rule_code
        entry = self._registry.get(f"{RULE_PREFIX}{code}")
        return dict(entry) if isinstance(entry, dict) else None

    def get_display_name(self, rule_code: str) -> str:
        entry = self.get_entry(rule_code) or {}
        if entry.get("display_name") or entry.get("short_description"):
            return str(entry.get("display_name") or entry.get("short_description"))
        rule = find_rule(rule_code)
        name = rule.symbol if rule is not None else rule_code
        return name.replace("-", " ").capitalize()

    def get_manual_instructions(self, rule_code: str) -> str:
        """Return manual fix instructions for the rule, falling back to the _default entry."""
        entry = self.get_entry(rule_code)
        if entry and "manual_instructions" in entry:
            return str(entry["manual_instructions"]).strip()
        default_entry = self._registry.get(f"{RULE_PREFIX}_default")
        if isinstance(default_entry, dict) and "manual_instructions" in default_entry:
            return str(default_entry["manual_instructions"]).strip()
        return "See project docs. Fix the violation at the reported location."
