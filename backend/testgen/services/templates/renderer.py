from dataclasses import dataclass
from typing import Callable, Dict

from testgen.entities.test_case import TestSummary

from .base import FrameworkKind, TemplateContext, classify_framework, test_file_name
from .component import render_component_test
from .generic import render_generic_test
from .java import render_java_test
from .python import render_python_test
from .script import render_script_test

TEMPLATES: Dict[FrameworkKind, Callable[[TemplateContext], str]] = {
    FrameworkKind.COMPONENT: render_component_test,
    FrameworkKind.SCRIPT: render_script_test,
    FrameworkKind.PYTHON: render_python_test,
    FrameworkKind.JAVA: render_java_test,
    FrameworkKind.GENERIC: render_generic_test,
}


@dataclass(frozen=True)
class RenderedTest:
    code: str
    file_name: str


def render_test(summary: TestSummary, source: str = "") -> RenderedTest:
    """Render test source for a summary. Pure: no I/O."""
    kind = classify_framework(summary.framework)
    ctx = TemplateContext.from_summary(summary, source)
    return RenderedTest(
        code=TEMPLATES[kind](ctx),
        file_name=test_file_name(summary.file, summary.framework),
    )
