from fastapi import APIRouter, Depends

from testgen.dtos import (
    CreatePullRequestRequest,
    CreatePullRequestResponse,
    PullRequestDraftRequest,
    PullRequestDraftResponse,
)
from testgen.middleware.auth import SessionContext, get_github_client, require_session
from testgen.services.generated_tests import GeneratedTestSet
from testgen.services.github import GitHubClient
from testgen.services.pull_request_service import PullRequestService, build_draft_defaults

router = APIRouter(prefix="/pulls", tags=["Pull Requests"])


def get_pull_request_service(
    client: GitHubClient = Depends(get_github_client),
) -> PullRequestService:
    """Get pull request service instance."""
    return PullRequestService(client)


@router.post("", response_model=CreatePullRequestResponse)
async def create_pull_request(
    payload: CreatePullRequestRequest,
    service: PullRequestService = Depends(get_pull_request_service),
):
    """Create a branch, commit the generated tests under tests/ and open a pull request."""
    tests = GeneratedTestSet.from_iterable(payload.tests).to_list()
    result = await service.create_test_pull_request(
        repository=payload.repository,
        branch_name=payload.branch_name,
        title=payload.title,
        description=payload.description,
        tests=tests,
    )
    return {"pullRequest": result}


@router.post("/draft", response_model=PullRequestDraftResponse)
async def pull_request_draft(
    payload: PullRequestDraftRequest,
    session: SessionContext = Depends(require_session),
):
    """Default branch name, title and description for a new draft."""
    tests = GeneratedTestSet.from_iterable(payload.tests).to_list()
    return build_draft_defaults(payload.files, tests)
