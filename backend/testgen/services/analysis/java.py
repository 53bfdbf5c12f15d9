from testgen.entities.test_case import Priority, TestKind

from .base import Feature, FileAnalyzer


class JavaAnalyzer(FileAnalyzer):
    extensions = ("java",)
    features = (
        Feature(
            "junit",
            "JUnit Tests",
            "Test Java class methods and business logic",
            "JUnit 5",
            TestKind.UNIT,
            Priority.HIGH,
        ),
        Feature(
            "spring",
            "Spring Integration Tests",
            "Test Spring components and web layer",
            "JUnit 5 + Spring Test",
            TestKind.INTEGRATION,
            Priority.MEDIUM,
        ),
    )

    SPRING_ANNOTATIONS = (
        "@Controller",
        "@RestController",
        "@Service",
        "@Repository",
        "@Component",
    )

    def detect(self, content: str) -> set[str]:
        tags = {"junit"}
        if any(annotation in content for annotation in self.SPRING_ANNOTATIONS):
            tags.add("spring")
        return tags
