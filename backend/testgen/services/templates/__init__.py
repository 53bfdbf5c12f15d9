"""Test source templates, one per framework family."""

from .base import (
    FrameworkKind,
    TemplateContext,
    classify_framework,
    feature_tags,
    test_file_name,
)
from .renderer import RenderedTest, render_test

__all__ = [
    "FrameworkKind",
    "RenderedTest",
    "TemplateContext",
    "classify_framework",
    "feature_tags",
    "render_test",
    "test_file_name",
]
