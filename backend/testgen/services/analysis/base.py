from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Tuple

from testgen.entities.github import FileContent
from testgen.entities.test_case import Priority, TestKind, TestSummary


@dataclass(frozen=True)
class Feature:
    """A detectable trait of a source file and the test case it suggests."""

    tag: str
    title: str
    description: str
    framework: str
    kind: TestKind
    priority: Priority


class FileAnalyzer(ABC):
    """Suggests test cases for one family of source files."""

    extensions: Tuple[str, ...] = ()
    features: Tuple[Feature, ...] = ()

    @abstractmethod
    def detect(self, content: str) -> set[str]:
        """Return the feature tags present in the file text."""
        pass

    def analyze(self, file: FileContent) -> List[TestSummary]:
        detected = self.detect(file.content or "")
        name = module_name(file.name)
        return [
            TestSummary(
                id=f"{file.path}-{feature.tag}",
                title=f"{name} - {feature.title}",
                description=feature.description.format(name=name),
                framework=feature.framework,
                type=feature.kind,
                file=file.path,
                priority=feature.priority,
            )
            for feature in self.features
            if feature.tag in detected
        ]


def extension_of(name: str) -> str:
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


def module_name(name: str) -> str:
    """File name without its final extension."""
    if "." not in name:
        return name
    return name.rsplit(".", 1)[0]
