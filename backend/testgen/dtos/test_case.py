"""Test generation DTOs"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from testgen.entities.github import FileEntry
from testgen.entities.test_case import TestSummary


class SummaryRequest(BaseModel):
    files: List[FileEntry] = []
    repository: str = Field(..., min_length=1, description="owner/name")


class SummaryResponse(BaseModel):
    summaries: List[TestSummary]
    total_files: int = Field(..., alias="totalFiles")

    model_config = ConfigDict(populate_by_name=True)


class TestCodeRequest(BaseModel):
    __test__ = False

    summary: TestSummary
    repository: str = Field(..., min_length=1, description="owner/name")


class TestCodeResponse(BaseModel):
    __test__ = False

    test_code: str = Field(..., alias="testCode")
    file_name: str = Field(..., alias="fileName")

    model_config = ConfigDict(populate_by_name=True)
