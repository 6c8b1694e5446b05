"""
Configuration file support for edge-cpwg.

Provides hierarchical configuration loading from:
1. Project config: .edge-cpwg.toml or edge-cpwg.toml in project root
2. User config: ~/.config/edge-cpwg/config.toml

CLI arguments override config file values, and project config overrides user config.
"""

import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import EdgeCpwgError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

# Config file names to search for in project directories
CONFIG_FILENAMES = [".edge-cpwg.toml", "edge-cpwg.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "edge-cpwg" / "config.toml"

OUTPUT_FORMATS = ("text", "json", "table")

# All known config keys for validation
KNOWN_KEYS = {
    "output": {"format", "precision"},
    "defaults": {"verbose", "strict"},
}


@dataclass
class OutputConfig:
    """Report rendering options."""

    format: str = "text"
    precision: int = 6


@dataclass
class DefaultsConfig:
    """Default options for the CLI."""

    verbose: bool = False
    strict: bool = False


@dataclass
class Config:
    """Merged configuration from all sources."""

    output: OutputConfig = field(default_factory=OutputConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    # Track which file each setting came from
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Load configuration with precedence: project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)

        Returns:
            Merged configuration object

        Raises:
            ConfigError: If a config file exists but cannot be read or parsed
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if USER_CONFIG_PATH.exists():
            user_data = _load_toml_file(USER_CONFIG_PATH)
            _merge_config(config, user_data, str(USER_CONFIG_PATH), sources)

        # Load project config (higher precedence)
        project_config = _find_project_config(start_dir)
        if project_config:
            project_data = _load_toml_file(project_config)
            _merge_config(config, project_data, str(project_config), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")


class ConfigError(EdgeCpwgError):
    """Configuration-related errors."""

    pass


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at .git directory or filesystem root.

    Args:
        start_dir: Directory to start searching from

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # Stop at .git directory (project root)
        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """
    Load a TOML file.

    Args:
        path: Path to TOML file

    Returns:
        Parsed TOML data

    Raises:
        ConfigError: If TOML is invalid or the file cannot be read
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(
            f"Invalid TOML in {path}: {e}",
            suggestions=["Run `edge-cpwg --init-config` to see a valid template"],
        ) from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Merge loaded config data into Config object.

    Args:
        config: Config object to update
        data: Raw config data from TOML
        source: Source file path (for tracking)
        sources: Dict to update with source info

    Raises:
        ConfigError: If a known key has a value of the wrong type
    """
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    if "output" in data:
        output_data = data["output"]
        _warn_unknown_keys(output_data, KNOWN_KEYS["output"], "output", source)

        if "format" in output_data:
            fmt = output_data["format"]
            if fmt not in OUTPUT_FORMATS:
                raise ConfigError(
                    f"Invalid output.format {fmt!r} in {source}",
                    context={"allowed": ", ".join(OUTPUT_FORMATS)},
                )
            config.output.format = fmt
            sources["output.format"] = source
        if "precision" in output_data:
            precision = output_data["precision"]
            if isinstance(precision, bool) or not isinstance(precision, int) or precision < 1:
                raise ConfigError(
                    f"Invalid output.precision {precision!r} in {source}",
                    suggestions=["Use a positive integer number of significant digits"],
                )
            config.output.precision = precision
            sources["output.precision"] = source

    if "defaults" in data:
        defaults_data = data["defaults"]
        _warn_unknown_keys(defaults_data, KNOWN_KEYS["defaults"], "defaults", source)

        if "verbose" in defaults_data:
            config.defaults.verbose = bool(defaults_data["verbose"])
            sources["defaults.verbose"] = source
        if "strict" in defaults_data:
            config.defaults.strict = bool(defaults_data["strict"])
            sources["defaults.strict"] = source


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    """Warn about unknown keys in a config section."""
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def generate_template() -> str:
    """
    Generate a template config file with all options documented.

    Returns:
        Template TOML string
    """
    return """# edge-cpwg configuration file
# Place as .edge-cpwg.toml in project root or ~/.config/edge-cpwg/config.toml for user defaults

[output]
# Report format: text, json, table
# format = "text"

# Significant digits for text and table output
# precision = 6

[defaults]
# Log intermediate values (geometry, moduli) to stderr
# verbose = false

# Reject physically invalid inputs instead of reporting NaN
# strict = false
"""


def get_config_paths() -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys
    """
    project_config = _find_project_config(Path.cwd())

    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": project_config,
    }


def _format_value(key: str, value: Any, source: str) -> str:
    """One ``key = value  # from: source`` line of the effective config."""
    if isinstance(value, str):
        formatted = f'"{value}"'
    elif isinstance(value, bool):
        formatted = "true" if value else "false"
    else:
        formatted = str(value)

    # Show just filename for brevity
    source_display = Path(source).name if source != "default" else source
    return f"{key} = {formatted}  # from: {source_display}"


def show_config(config: Config) -> str:
    """
    Describe the effective configuration and where each value came from.

    Args:
        config: Loaded configuration

    Returns:
        TOML-like text listing the config file paths and every setting
    """
    paths = get_config_paths()
    lines = [
        "# Effective edge-cpwg configuration",
        f"# User config: {USER_CONFIG_PATH} ({'exists' if paths['user'] else 'not found'})",
        f"# Project config: {paths['project'] or 'not found'}",
        "",
        "[output]",
        _format_value("format", config.output.format, config.get_source("output.format")),
        _format_value("precision", config.output.precision, config.get_source("output.precision")),
        "",
        "[defaults]",
        _format_value("verbose", config.defaults.verbose, config.get_source("defaults.verbose")),
        _format_value("strict", config.defaults.strict, config.get_source("defaults.strict")),
    ]
    return "\n".join(lines)
