from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet

from testgen.entities.test_case import TestSummary


class FrameworkKind(str, Enum):
    """Template family, in matching priority order."""

    COMPONENT = "component"
    SCRIPT = "script"
    PYTHON = "python"
    JAVA = "java"
    GENERIC = "generic"


def classify_framework(framework: str) -> FrameworkKind:
    lowered = (framework or "").lower()
    if "jest" in lowered and "react" in lowered:
        return FrameworkKind.COMPONENT
    if "jest" in lowered:
        return FrameworkKind.SCRIPT
    if "pytest" in lowered:
        return FrameworkKind.PYTHON
    if "junit" in lowered:
        return FrameworkKind.JAVA
    return FrameworkKind.GENERIC


def base_name(path: str) -> str:
    """Last path segment without its extension."""
    last = (path or "").rstrip("/").rsplit("/", 1)[-1]
    if "." in last:
        last = last.rsplit(".", 1)[0]
    return last or "test"


def strip_extension(path: str) -> str:
    head, _, last = (path or "").rpartition("/")
    if "." in last:
        last = last.rsplit(".", 1)[0]
    return f"{head}/{last}" if head else last


def test_file_name(path: str, framework: str) -> str:
    """Output file name for a generated test.

    >>> test_file_name("src/Widget.tsx", "Jest + React Testing Library")
    'Widget.test.js'
    """
    base = base_name(path)
    lowered = (framework or "").lower()
    if "jest" in lowered:
        return f"{base}.test.js"
    if "pytest" in lowered:
        return f"test_{base}.py"
    if "junit" in lowered:
        return f"{base}Test.java"
    return f"{base}.test.js"


def feature_tags(summary: TestSummary) -> FrozenSet[str]:
    """Feature tags encoded in a summary id ("<file path>-<tag>")."""
    prefix = f"{summary.file}-"
    if summary.id.startswith(prefix):
        tag = summary.id[len(prefix):]
    else:
        tag = summary.id.rsplit("-", 1)[-1]
    return frozenset({tag}) if tag else frozenset()


@dataclass(frozen=True)
class TemplateContext:
    summary: TestSummary
    name: str
    import_path: str
    tags: FrozenSet[str]
    source: str = ""

    @classmethod
    def from_summary(cls, summary: TestSummary, source: str = "") -> "TemplateContext":
        return cls(
            summary=summary,
            name=base_name(summary.file),
            import_path=strip_extension(summary.file),
            tags=feature_tags(summary),
            source=source or "",
        )
