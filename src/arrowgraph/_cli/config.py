"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from arrowgraph._errors import ConfigError


@dataclass(slots=True, frozen=True)
class ArrowgraphConfig:
    """Configuration loaded from pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    graph: Path | None = None
    output: Path | None = None
    sort: bool = True
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def _parse_path(section: dict[str, object], key: str, project_root: Path) -> Path | None:
    if key not in section:
        return None
    value = section[key]
    if not isinstance(value, str):
        msg = f"Invalid [tool.arrowgraph].{key}: expected string path"
        raise ConfigError(msg)
    path = Path(value)
    if not path.is_absolute():
        path = project_root / path
    return path


def load_config(pyproject_path: Path) -> ArrowgraphConfig:
    """Load and validate [tool.arrowgraph] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed ArrowgraphConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    tool_section = data.get("tool", {})
    section = tool_section.get("arrowgraph", {})

    if not section:
        return ArrowgraphConfig(project_root=project_root)

    if not isinstance(section, dict):
        msg = "Invalid [tool.arrowgraph] configuration: expected a table"
        raise ConfigError(msg)

    sort = section.get("sort", True)
    if not isinstance(sort, bool):
        msg = "Invalid [tool.arrowgraph].sort: expected boolean"
        raise ConfigError(msg)

    return ArrowgraphConfig(
        graph=_parse_path(section, "graph", project_root),
        output=_parse_path(section, "output", project_root),
        sort=sort,
        project_root=project_root,
    )


def get_config() -> ArrowgraphConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        ArrowgraphConfig (may be empty if no pyproject.toml or no [tool.arrowgraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return ArrowgraphConfig()
    return load_config(pyproject_path)
