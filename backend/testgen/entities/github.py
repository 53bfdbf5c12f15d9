"""GitHub resources as read from the REST API."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Repository(BaseModel):
    id: int
    name: str
    full_name: str = Field(..., description="owner/name identifier")
    description: Optional[str] = None
    language: Optional[str] = None
    private: bool = False
    updated_at: Optional[datetime] = None
    default_branch: Optional[str] = None
    html_url: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class FileEntry(BaseModel):
    name: str
    path: str
    type: str = Field(default="file", description="'file' or 'dir'")
    size: Optional[int] = None

    model_config = ConfigDict(extra="ignore")

    @property
    def is_file(self) -> bool:
        return self.type == "file"


class FileContent(BaseModel):
    name: str
    path: str
    content: str
    size: Optional[int] = None


class PullRequestRef(BaseModel):
    number: int
    title: str
    html_url: str
    head_ref: str
    base_ref: str

    @classmethod
    def from_api(cls, data: dict) -> "PullRequestRef":
        return cls(
            number=data["number"],
            title=data.get("title") or "",
            html_url=data.get("html_url") or "",
            head_ref=(data.get("head") or {}).get("ref") or "",
            base_ref=(data.get("base") or {}).get("ref") or "",
        )
