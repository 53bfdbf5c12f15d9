import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from testgen.config import settings
from testgen.dtos import (
    SummaryRequest,
    SummaryResponse,
    TestCodeRequest,
    TestCodeResponse,
)
from testgen.entities.github import FileContent, FileEntry
from testgen.middleware.auth import get_github_client
from testgen.services.analysis import analyze_files, is_supported
from testgen.services.github import GitHubClient
from testgen.services.templates import render_test

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tests", tags=["Test Generation"])


@router.post("/summaries", response_model=SummaryResponse)
async def generate_summaries(
    payload: SummaryRequest,
    client: GitHubClient = Depends(get_github_client),
):
    """Fetch the selected files and suggest test cases for each of them."""
    if not payload.files:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No files provided",
        )

    semaphore = asyncio.Semaphore(max(1, settings.FILE_FETCH_CONCURRENCY))

    async def _fetch(entry: FileEntry) -> FileContent:
        async with semaphore:
            return await client.get_file(payload.repository, entry.path)

    # Directories and unsupported extensions yield no summaries and are not fetched
    analyzable = [
        entry for entry in payload.files if entry.is_file and is_supported(entry.name)
    ]
    contents = await asyncio.gather(*(_fetch(entry) for entry in analyzable))

    summaries = analyze_files(contents)
    logger.info(
        "Generated %d summaries for %d files in %s",
        len(summaries),
        len(payload.files),
        payload.repository,
    )
    return {"summaries": summaries, "totalFiles": len(payload.files)}


@router.post("/code", response_model=TestCodeResponse)
async def generate_test_code(
    payload: TestCodeRequest,
    client: GitHubClient = Depends(get_github_client),
):
    """Render test source for one summary from the current file content."""
    source = await client.get_file(payload.repository, payload.summary.file)
    rendered = render_test(payload.summary, source.content)
    return {"testCode": rendered.code, "fileName": rendered.file_name}
