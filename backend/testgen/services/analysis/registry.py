from typing import Optional

from .base import FileAnalyzer, extension_of
from .component import ComponentAnalyzer
from .java import JavaAnalyzer
from .python import PythonAnalyzer
from .script import ScriptAnalyzer


class AnalyzerRegistry:
    _analyzers: tuple[FileAnalyzer, ...] = (
        ComponentAnalyzer(),
        ScriptAnalyzer(),
        PythonAnalyzer(),
        JavaAnalyzer(),
    )
    _by_extension: dict[str, FileAnalyzer] = {
        ext: analyzer for analyzer in _analyzers for ext in analyzer.extensions
    }

    @classmethod
    def get_analyzer(cls, file_name: str) -> Optional[FileAnalyzer]:
        """Analyzer for a file name, or None when its extension is not analyzed."""
        return cls._by_extension.get(extension_of(file_name))

    @classmethod
    def get_supported_extensions(cls) -> list[str]:
        return list(cls._by_extension.keys())
