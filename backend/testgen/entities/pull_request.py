from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FileWriteOutcome(BaseModel):
    """Result of writing one generated test file onto the pull request branch."""

    path: str
    file_name: str = Field(..., alias="fileName")
    success: bool
    error: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class PullRequestResult(BaseModel):
    number: int
    title: str
    html_url: str
    branch: str
    base: str
    branch_created: bool = Field(
        default=True, description="False when the branch already existed"
    )
    reused: bool = Field(
        default=False, description="True when an open pull request was found for the branch"
    )
    files: List[FileWriteOutcome] = []

    @property
    def failed_files(self) -> List[FileWriteOutcome]:
        return [outcome for outcome in self.files if not outcome.success]
