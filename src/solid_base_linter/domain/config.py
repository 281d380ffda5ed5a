"""Configuration for solid base analysis. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from solid_base_linter.domain.constants import (
    DEFAULT_MARKER_DECORATORS,
    DEFAULT_SOLID_BUILTINS,
    DEFAULT_TYPESHED_MODULES,
    UNIVERSAL_ROOT,
)

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Immutable configuration for the analyzer.

    Created by Infrastructure from (config_dict, tool_section). Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict, tool_section) at composition root.
    """

    KNOWN_KEYS: frozenset[str] = frozenset(
        {
            "solid_builtins",
            "marker_decorators",
            "universal_root",
            "use_typeshed",
            "typeshed_modules",
            "exclude_paths",
        }
    )

    def __init__(
        self,
        config_dict: dict[str, object] | None = None,
        tool_section: dict[str, object] | None = None,
    ) -> None:
        """Set config once at construction. No mutable state after init."""
        self._config: dict[str, object] = dict(config_dict or {})
        self._tool_section: dict[str, object] = dict(tool_section or {})
        if self._config:
            self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about unknown keys and values of the wrong type. Never raises."""
        for key in sorted(set(config) - self.KNOWN_KEYS):
            logger.warning("Configuration Warning: unknown key '%s' in [tool.solid-base].", key)
        for key in ("solid_builtins", "marker_decorators", "typeshed_modules", "exclude_paths"):
            value = config.get(key)
            if value is not None and not isinstance(value, list):
                logger.warning(
                    "Configuration Warning: '%s' must be a list of strings; ignoring %r.", key, value
                )
        root = config.get("universal_root")
        if root is not None and not isinstance(root, str):
            logger.warning("Configuration Warning: 'universal_root' must be a string; ignoring %r.", root)
        use_typeshed = config.get("use_typeshed")
        if use_typeshed is not None and not isinstance(use_typeshed, bool):
            logger.warning(
                "Configuration Warning: 'use_typeshed' must be true or false; ignoring %r.", use_typeshed
            )

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def tool_section(self) -> dict[str, object]:
        return self._tool_section

    def _string_list(self, key: str) -> list[str]:
        raw = self._config.get(key, [])
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return []

    @property
    def universal_root(self) -> str:
        raw = self._config.get("universal_root")
        return raw if isinstance(raw, str) and raw else UNIVERSAL_ROOT

    @property
    def extra_solid_builtins(self) -> frozenset[str]:
        """Fixed-layout classes added by the project on top of the defaults."""
        return frozenset(self._string_list("solid_builtins"))

    @property
    def solid_builtins(self) -> frozenset[str]:
        """Default fixed-layout builtins plus project additions."""
        return DEFAULT_SOLID_BUILTINS | self.extra_solid_builtins

    @property
    def marker_decorators(self) -> frozenset[str]:
        """Decorator names (last dotted component) that mark a class as a solid base."""
        custom = self._string_list("marker_decorators")
        if not custom:
            return DEFAULT_MARKER_DECORATORS
        return frozenset(name.rsplit(".", 1)[-1] for name in custom)

    @property
    def use_typeshed(self) -> bool:
        raw = self._config.get("use_typeshed")
        return raw if isinstance(raw, bool) else True

    @property
    def typeshed_modules(self) -> tuple[str, ...]:
        custom = self._string_list("typeshed_modules")
        return tuple(custom) if custom else DEFAULT_TYPESHED_MODULES

    @property
    def exclude_paths(self) -> list[str]:
        """Path fragments skipped when analyzing a source tree."""
        return self._string_list("exclude_paths")

    def is_excluded(self, file_path: str) -> bool:
        normalized = file_path.replace("\\", "/")
        return any(fragment in normalized for fragment in self.exclude_paths)
