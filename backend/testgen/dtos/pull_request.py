"""Pull request DTOs"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from testgen.entities.github import FileEntry
from testgen.entities.pull_request import PullRequestResult
from testgen.entities.test_case import GeneratedTest


class CreatePullRequestRequest(BaseModel):
    # Missing values are reported as an invalid draft (400), not a 422
    repository: str = ""
    branch_name: str = Field(default="", alias="branchName")
    title: str = ""
    description: str = ""
    tests: List[GeneratedTest] = []

    model_config = ConfigDict(populate_by_name=True)


class CreatePullRequestResponse(BaseModel):
    pull_request: PullRequestResult = Field(..., alias="pullRequest")

    model_config = ConfigDict(populate_by_name=True)


class PullRequestDraftRequest(BaseModel):
    files: List[FileEntry] = []
    tests: List[GeneratedTest] = []


class PullRequestDraftResponse(BaseModel):
    branch_name: str = Field(..., alias="branchName")
    title: str
    description: str

    model_config = ConfigDict(populate_by_name=True)
