"""Load [tool.solid-base] and [tool] from pyproject.toml. Infrastructure I/O only."""

import sys
from pathlib import Path
from typing import Optional

from solid_base_linter.domain.exceptions import ConfigurationError

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib  # type: ignore[import-not-found]


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml."""

    TOOL_KEYS: tuple[str, ...] = ("solid-base", "solid_base")

    @staticmethod
    def find_pyproject(start: Optional[Path] = None) -> Optional[Path]:
        """Walk up from start (default: cwd) to the first pyproject.toml."""
        current_path = (start or Path.cwd()).resolve()
        for candidate in (current_path, *current_path.parents):
            config_file = candidate / "pyproject.toml"
            if config_file.is_file():
                return config_file
        return None

    @staticmethod
    def load_config_from_fs(
        start: Optional[Path] = None,
    ) -> tuple[dict[str, object], dict[str, object]]:
        """Load [tool.solid-base] and [tool] from pyproject.toml. Returns (config_dict, tool_section)."""
        empty: dict[str, object] = {}
        config_file = ConfigFileLoader.find_pyproject(start)
        if config_file is None:
            return (empty, empty)
        try:
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
        except OSError:
            return (empty, empty)
        except toml_lib.TOMLDecodeError as exc:
            raise ConfigurationError(f"Invalid TOML in {config_file}: {exc}") from exc
        tool_section = data.get("tool", {}) or {}
        config_dict: dict[str, object] = {}
        for key in ConfigFileLoader.TOOL_KEYS:
            section = tool_section.get(key)
            if isinstance(section, dict):
                config_dict = section
                break
        return (config_dict, tool_section)
