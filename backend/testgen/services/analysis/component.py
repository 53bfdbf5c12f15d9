import re

from testgen.entities.test_case import Priority, TestKind

from .base import Feature, FileAnalyzer

FRAMEWORK = "Jest + React Testing Library"


class ComponentAnalyzer(FileAnalyzer):
    extensions = ("tsx", "jsx")
    features = (
        Feature(
            "render",
            "Render Test",
            "Test that {name} renders without crashing and displays expected content",
            FRAMEWORK,
            TestKind.UNIT,
            Priority.HIGH,
        ),
        Feature(
            "props",
            "Props Test",
            "Test component behavior with different prop combinations and edge cases",
            FRAMEWORK,
            TestKind.UNIT,
            Priority.HIGH,
        ),
        Feature(
            "state",
            "State Management Test",
            "Test state updates and component re-rendering with useState hooks",
            FRAMEWORK,
            TestKind.UNIT,
            Priority.MEDIUM,
        ),
        Feature(
            "events",
            "Event Handling Test",
            "Test user interactions and event handlers (clicks, form submissions, etc.)",
            FRAMEWORK,
            TestKind.INTEGRATION,
            Priority.HIGH,
        ),
        Feature(
            "effects",
            "Side Effects Test",
            "Test useEffect hooks, API calls, and cleanup functions",
            FRAMEWORK,
            TestKind.INTEGRATION,
            Priority.MEDIUM,
        ),
    )

    PROP_PATTERN = re.compile(r"\w+:\s*\w+")
    EVENT_PATTERN = re.compile(r"on\w+=")

    def detect(self, content: str) -> set[str]:
        tags = {"render"}
        if "props" in content or self.PROP_PATTERN.search(content):
            tags.add("props")
        if "useState" in content:
            tags.add("state")
        if self.EVENT_PATTERN.search(content):
            tags.add("events")
        if "useEffect" in content:
            tags.add("effects")
        return tags
