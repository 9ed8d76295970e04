"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_WIDTH = 2


class ConfigError(Exception):
    """Error in graff configuration."""


@dataclass(slots=True, frozen=True)
class GraffConfig:
    """Configuration loaded from the ``[tool.graff]`` table of pyproject.toml.

    Relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    width: int | None = None
    output: Path | None = None
    project_root: Path | None = None

    def resolve_width(self, width: int | None) -> int:
        """Pick the layer width: explicit value, then configured value, then the default."""
        if width is not None:
            return width
        if self.width is not None:
            return self.width
        return DEFAULT_WIDTH


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(pyproject_path: Path) -> GraffConfig:
    """Load and validate [tool.graff] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraffConfig

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

    graff_section = data.get("tool", {}).get("graff", {})

    if not graff_section:
        return GraffConfig(project_root=project_root)

    width: int | None = None
    if "width" in graff_section:
        width_value = graff_section["width"]
        # bool is a subclass of int
        if not isinstance(width_value, int) or isinstance(width_value, bool) or width_value < 1:
            msg = "Invalid [tool.graff].width: expected a positive integer"
            raise ConfigError(msg)
        width = width_value

    output_path: Path | None = None
    if "output" in graff_section:
        output_value = graff_section["output"]
        if not isinstance(output_value, str):
            msg = "Invalid [tool.graff].output: expected string path"
            raise ConfigError(msg)
        output_path = Path(output_value)
        if not output_path.is_absolute():
            output_path = project_root / output_path

    return GraffConfig(
        width=width,
        output=output_path,
        project_root=project_root,
    )


def get_config() -> GraffConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GraffConfig (may be empty if no pyproject.toml or no [tool.graff] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraffConfig()
    return load_config(pyproject_path)
