"""
Project configuration loader.

Reads optional defaults from a `.todoscan.yml` file at the project root:

    todo_types: [TODO, FIXME]
    exclude: ["*.min.js"]
    exclude_dir: [build]
    charset: detect
"""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from todoscan.shared.domain.exceptions import ConfigurationError
from todoscan.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

PROJECT_CONFIG_FILE = ".todoscan.yml"


class ProjectConfig(BaseModel):
    """Scan defaults declared by a project."""

    model_config = {"extra": "forbid"}

    todo_types: List[str] = Field(default_factory=list)
    exclude: List[str] = Field(default_factory=list)
    exclude_dir: List[str] = Field(default_factory=list)
    charset: Optional[str] = None

    @field_validator("todo_types", "exclude", "exclude_dir", mode="before")
    @classmethod
    def _split_strings(cls, value):
        """Accept a comma separated string as well as a list."""
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value


def load_project_config(path: Path) -> ProjectConfig:
    """
    Load project configuration.

    Args:
        path: Config file, or a directory holding `.todoscan.yml`

    Returns:
        Parsed configuration; defaults when the file does not exist

    Raises:
        ConfigurationError: If the file is not valid YAML or has unknown keys
    """
    if path.is_dir():
        path = path / PROJECT_CONFIG_FILE

    if not path.exists():
        return ProjectConfig()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid YAML in {path}: {e}", context={"path": str(path)}) from e
    except OSError as e:
        raise ConfigurationError(f"reading {path}: {e}", context={"path": str(path)}) from e

    if data is None:
        return ProjectConfig()

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a mapping", context={"path": str(path)})

    try:
        config = ProjectConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"{path}: {e}", context={"path": str(path)}) from e

    logger.debug("project_config_loaded", path=str(path))
    return config
