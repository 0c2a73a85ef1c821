"""Unit tests for the TemplateManager class.

This module tests the template management functionality including
listing templates, getting template content, and initializing templates.
"""

import json
from pathlib import Path

import pytest

from furniture_estimator.application.config import load_config, validate_config
from furniture_estimator.application.templates import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)


class TestTemplateManager:
    """Test suite for TemplateManager class."""

    @pytest.fixture
    def manager(self) -> TemplateManager:
        return TemplateManager()

    def test_list_templates_returns_all_templates(self, manager: TemplateManager) -> None:
        names = [name for name, _ in manager.list_templates()]
        assert names == ["wardrobe", "wardrobe-deluxe", "table", "sofa"]

    def test_list_templates_returns_descriptions(self, manager: TemplateManager) -> None:
        assert dict(manager.list_templates()) == TEMPLATE_METADATA

    def test_get_template_wardrobe(self, manager: TemplateManager) -> None:
        data = json.loads(manager.get_template("wardrobe"))

        assert data["schema_version"] == "1.0"
        assert data["furniture"]["kind"] == "wardrobe"
        assert data["furniture"]["height"] == 72
        assert data["furniture"]["num_doors"] == 2

    def test_get_template_not_found(self, manager: TemplateManager) -> None:
        with pytest.raises(TemplateNotFoundError) as exc_info:
            manager.get_template("bookcase")
        assert exc_info.value.name == "bookcase"
        assert "Template not found: bookcase" in str(exc_info.value)

    def test_template_exists(self, manager: TemplateManager) -> None:
        assert manager.template_exists("sofa")
        assert not manager.template_exists("ottoman")

    def test_init_template(self, manager: TemplateManager, tmp_path: Path) -> None:
        output = tmp_path / "my-table.json"
        manager.init_template("table", output)
        assert json.loads(output.read_text())["furniture"]["kind"] == "table"

    def test_init_template_refuses_overwrite(
        self, manager: TemplateManager, tmp_path: Path
    ) -> None:
        output = tmp_path / "existing.json"
        output.write_text("{}")
        with pytest.raises(FileExistsError):
            manager.init_template("table", output)
        assert output.read_text() == "{}"

    def test_init_template_overwrite(self, manager: TemplateManager, tmp_path: Path) -> None:
        output = tmp_path / "existing.json"
        output.write_text("{}")
        manager.init_template("sofa", output, overwrite=True)
        assert json.loads(output.read_text())["furniture"]["kind"] == "sofa"

    @pytest.mark.parametrize("name", list(TEMPLATE_METADATA))
    def test_every_template_is_valid(
        self, manager: TemplateManager, tmp_path: Path, name: str
    ) -> None:
        output = tmp_path / f"{name}.json"
        manager.init_template(name, output)

        result = validate_config(load_config(output))
        assert result.is_valid
        assert result.warnings == []
