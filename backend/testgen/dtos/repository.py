"""Repository browsing DTOs"""

from typing import List

from pydantic import BaseModel

from testgen.entities.github import FileEntry, Repository


class RepositoryListResponse(BaseModel):
    repositories: List[Repository]


class FileListResponse(BaseModel):
    files: List[FileEntry]
