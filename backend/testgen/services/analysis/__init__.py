"""Heuristic test case suggestions based on file extension and text markers."""

from typing import Iterable, List

from testgen.entities.github import FileContent
from testgen.entities.test_case import TestSummary

from .base import Feature, FileAnalyzer
from .registry import AnalyzerRegistry


def is_supported(file_name: str) -> bool:
    return AnalyzerRegistry.get_analyzer(file_name) is not None


def analyze_file(file: FileContent) -> List[TestSummary]:
    """Summaries for one file; unsupported extensions yield an empty list."""
    analyzer = AnalyzerRegistry.get_analyzer(file.name)
    if analyzer is None:
        return []
    return analyzer.analyze(file)


def analyze_files(files: Iterable[FileContent]) -> List[TestSummary]:
    """Summaries for every file in input order, without repeated ids."""
    summaries: List[TestSummary] = []
    seen: set[str] = set()
    for file in files:
        for summary in analyze_file(file):
            if summary.id in seen:
                continue
            seen.add(summary.id)
            summaries.append(summary)
    return summaries


__all__ = [
    "AnalyzerRegistry",
    "Feature",
    "FileAnalyzer",
    "analyze_file",
    "analyze_files",
    "is_supported",
]
