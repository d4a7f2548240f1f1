"""GitHub Actions workflow operations built on the raw client."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from ..schemas.workflows import WorkflowListResponse, WorkflowRunListResponse
from .github_client import list_workflow_runs_raw, list_workflows_raw
from .github_errors import GitHubAPIError, GitHubSchemaError

logger = logging.getLogger(__name__)


def list_workflows(client: httpx.Client, owner: str, repo: str) -> WorkflowListResponse:
    """Fetch every workflow configured for ``owner/repo``.

    All errors propagate; without the list there is nothing to report.
    """
    data = list_workflows_raw(client, owner, repo)
    try:
        workflows = WorkflowListResponse.model_validate(data)
    except ValidationError as exc:
        raise GitHubSchemaError(f"Unexpected workflow list payload: {exc}") from exc

    logger.info(
        "Parsed workflow list from GitHub",
        extra={"total_count": workflows.total_count, "returned": len(workflows.workflows)},
    )
    return workflows


def get_last_run_timestamp(
    client: httpx.Client,
    owner: str,
    repo: str,
    workflow_id: int,
) -> str | None:
    """Return the creation timestamp of the most recent run, if there is one.

    A workflow that never ran yields None. So does one whose run history the
    API refuses to serve, after a warning so the operator can tell the two
    apart. Transport and payload errors propagate.
    """
    try:
        data = list_workflow_runs_raw(client, owner, repo, workflow_id, per_page=1)
    except GitHubAPIError as exc:
        logger.warning("⚠️  Failed to fetch runs for workflow %s: %s", workflow_id, exc.status)
        return None

    try:
        runs = WorkflowRunListResponse.model_validate(data)
    except ValidationError as exc:
        raise GitHubSchemaError(f"Unexpected run list payload for workflow {workflow_id}: {exc}") from exc

    if not runs.workflow_runs:
        return None
    return runs.workflow_runs[0].created_at
