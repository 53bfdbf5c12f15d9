from fastapi import APIRouter, Depends, Query

from testgen.dtos import FileListResponse, RepositoryListResponse
from testgen.entities.github import FileContent
from testgen.middleware.auth import get_github_client
from testgen.services.analysis import is_supported
from testgen.services.github import GitHubClient

router = APIRouter(prefix="/repos", tags=["Repositories"])


@router.get("", response_model=RepositoryListResponse)
async def list_repositories(client: GitHubClient = Depends(get_github_client)):
    """Repositories of the signed-in user, most recently updated first."""
    repositories = await client.list_repositories()
    return {"repositories": repositories}


@router.get("/{owner}/{name}/files", response_model=FileListResponse)
async def list_files(
    owner: str,
    name: str,
    path: str = Query("", description="Directory path, repository root when empty"),
    supported_only: bool = Query(
        False, description="Only return files the analyzer can generate tests for"
    ),
    client: GitHubClient = Depends(get_github_client),
):
    """List one directory level of a repository."""
    files = await client.list_directory(f"{owner}/{name}", path)
    if supported_only:
        files = [entry for entry in files if entry.is_file and is_supported(entry.name)]
    return {"files": files}


@router.get("/{owner}/{name}/file", response_model=FileContent)
async def get_file(
    owner: str,
    name: str,
    path: str = Query(..., min_length=1, description="File path inside the repository"),
    client: GitHubClient = Depends(get_github_client),
):
    """Fetch one file's decoded text content."""
    return await client.get_file(f"{owner}/{name}", path)
