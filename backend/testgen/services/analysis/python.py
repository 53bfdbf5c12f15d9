from testgen.entities.test_case import Priority, TestKind

from .base import Feature, FileAnalyzer


class PythonAnalyzer(FileAnalyzer):
    extensions = ("py",)
    features = (
        Feature(
            "functions",
            "Function Tests",
            "Test Python functions with pytest framework",
            "pytest",
            TestKind.UNIT,
            Priority.HIGH,
        ),
        Feature(
            "classes",
            "Class Tests",
            "Test class methods, initialization, and inheritance",
            "pytest",
            TestKind.UNIT,
            Priority.HIGH,
        ),
        Feature(
            "http",
            "HTTP Integration Tests",
            "Test outgoing HTTP calls with the network mocked out",
            "pytest",
            TestKind.INTEGRATION,
            Priority.MEDIUM,
        ),
        Feature(
            "selenium",
            "Selenium Tests",
            "Test web automation and browser interactions",
            "pytest + Selenium",
            TestKind.E2E,
            Priority.MEDIUM,
        ),
    )

    HTTP_CLIENTS = ("requests", "urllib", "httpx")

    def detect(self, content: str) -> set[str]:
        tags = {"functions"}
        if "class " in content:
            tags.add("classes")
        if any(client in content for client in self.HTTP_CLIENTS):
            tags.add("http")
        if "selenium" in content or "webdriver" in content:
            tags.add("selenium")
        return tags
