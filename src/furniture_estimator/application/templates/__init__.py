"""Furniture templates and preset configurations.

This package provides bundled estimate configurations for common pieces
and a TemplateManager class for accessing them.
"""

from furniture_estimator.application.templates.manager import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)

__all__ = [
    "TEMPLATE_METADATA",
    "TemplateManager",
    "TemplateNotFoundError",
]
