from testgen.entities.test_case import Priority, TestKind

from .base import Feature, FileAnalyzer


class ScriptAnalyzer(FileAnalyzer):
    extensions = ("ts", "js")
    features = (
        Feature(
            "functions",
            "Function Tests",
            "Test exported functions with various inputs and edge cases",
            "Jest",
            TestKind.UNIT,
            Priority.HIGH,
        ),
        Feature(
            "async",
            "Async Operations Test",
            "Test asynchronous functions, promises, and error handling",
            "Jest",
            TestKind.INTEGRATION,
            Priority.HIGH,
        ),
        Feature(
            "api",
            "API Integration Test",
            "Test API calls, network requests, and response handling",
            "Jest + MSW",
            TestKind.INTEGRATION,
            Priority.MEDIUM,
        ),
    )

    HTTP_CLIENTS = ("fetch", "axios", "http")

    def detect(self, content: str) -> set[str]:
        tags = {"functions"}
        if "async" in content or "await" in content:
            tags.add("async")
        if any(client in content for client in self.HTTP_CLIENTS):
            tags.add("api")
        return tags
