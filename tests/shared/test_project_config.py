"""
Tests for .todoscan.yml loading.
"""

import pytest

from todoscan.shared.domain.exceptions import ConfigurationError
from todoscan.shared.infrastructure.project_config import (
    PROJECT_CONFIG_FILE,
    ProjectConfig,
    load_project_config,
)


class TestLoadProjectConfig:
    """Test loading project defaults."""

    def test_missing_file_gives_defaults(self, project_root):
        assert load_project_config(project_root) == ProjectConfig()

    def test_empty_file_gives_defaults(self, project_root):
        (project_root / PROJECT_CONFIG_FILE).write_text("")

        assert load_project_config(project_root) == ProjectConfig()

    def test_loads_values(self, project_root):
        (project_root / PROJECT_CONFIG_FILE).write_text(
            "todo_types: [TODO, NOTE]\n"
            "exclude: ['*.min.js']\n"
            "exclude_dir: [build]\n"
            "charset: detect\n"
        )

        config = load_project_config(project_root)

        assert config.todo_types == ["TODO", "NOTE"]
        assert config.exclude == ["*.min.js"]
        assert config.exclude_dir == ["build"]
        assert config.charset == "detect"

    def test_comma_separated_strings(self, project_root):
        (project_root / PROJECT_CONFIG_FILE).write_text("todo_types: 'TODO, FIXME,'\n")

        assert load_project_config(project_root).todo_types == ["TODO", "FIXME"]

    def test_explicit_file_path(self, project_root):
        path = project_root / "scan.yml"
        path.write_text("charset: latin-1\n")

        assert load_project_config(path).charset == "latin-1"

    @pytest.mark.parametrize(
        "content",
        [
            "todo_types: [TODO\n",
            "- just\n- a list\n",
            "unknown_key: 1\n",
            "todo_types: 5\n",
        ],
    )
    def test_invalid_config(self, project_root, content):
        """Test malformed files raise ConfigurationError with the path."""
        path = project_root / PROJECT_CONFIG_FILE
        path.write_text(content)

        with pytest.raises(ConfigurationError) as exc_info:
            load_project_config(project_root)

        assert exc_info.value.context["path"] == str(path)
