"""Template manager for bundled estimate configuration templates.

This module provides the TemplateManager class for accessing and copying
bundled template configurations.
"""

from importlib import resources
from pathlib import Path


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Template metadata: name -> description
TEMPLATE_METADATA: dict[str, str] = {
    "wardrobe": "Two-door plywood wardrobe with hanging rod",
    "wardrobe-deluxe": "Four-door wardrobe with drawers, lighting and glass doors",
    "table": "Painted solid wood table",
    "sofa": "Three-seat fabric sofa with arms",
}


class TemplateManager:
    """Manager for bundled estimate configuration templates.

    Example:
        manager = TemplateManager()
        for name, description in manager.list_templates():
            print(f"{name}: {description}")

        manager.init_template("sofa", Path("my-sofa.json"))
    """

    def __init__(self) -> None:
        self._data_package = "furniture_estimator.application.templates.data"

    def list_templates(self) -> list[tuple[str, str]]:
        """List all available templates as (name, description) tuples."""
        return list(TEMPLATE_METADATA.items())

    def get_template(self, name: str) -> str:
        """Get the JSON content of a template.

        Args:
            name: The template name (without .json extension).

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)

        try:
            template_file = resources.files(self._data_package).joinpath(f"{name}.json")
            return template_file.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def init_template(self, name: str, output_path: Path, overwrite: bool = False) -> None:
        """Copy a template to the specified output path.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            FileExistsError: If the output file exists and overwrite is False.
        """
        content = self.get_template(name)
        if output_path.exists() and not overwrite:
            raise FileExistsError(f"Output file already exists: {output_path}")
        output_path.write_text(content, encoding="utf-8")

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA
