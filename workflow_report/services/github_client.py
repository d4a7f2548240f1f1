"""Low-level HTTP calls to the GitHub REST API."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from ..config import Settings
from .github_errors import GitHubAPIError, GitHubSchemaError, GitHubTransportError

logger = logging.getLogger(__name__)


def _repo_path(owner: str, repo: str) -> str:
    # Each name is one path segment; "/" or "?" must not reach the URL unescaped.
    return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"


def _headers(settings: Settings) -> dict[str, str]:
    # GitHub rejects requests without a User-Agent.
    return {
        "User-Agent": settings.user_agent,
        "Accept": "application/vnd.github+json",
    }


def build_client(
    settings: Settings,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create the client shared by every request of one invocation."""
    kwargs: dict[str, Any] = {
        "base_url": settings.api_url,
        "headers": _headers(settings),
        "transport": transport,
    }
    if settings.timeout is not None:
        kwargs["timeout"] = httpx.Timeout(settings.timeout)
    return httpx.Client(**kwargs)


def fetch_json(
    client: httpx.Client,
    path: str,
    params: dict[str, str | int] | None = None,
) -> dict | list:
    """GET ``path`` and return the decoded JSON body.

    Raises:
        GitHubTransportError: the request did not complete.
        GitHubAPIError: the API answered with a non-success status.
        GitHubSchemaError: the body is not valid JSON.
    """
    logger.debug("GitHub API request: method=GET path=%s params=%s", path, params)
    try:
        response = client.get(path, params=params)
    except httpx.HTTPError as exc:
        raise GitHubTransportError(f"Request to {path} failed: {exc}") from exc

    logger.debug(
        "GitHub API response: method=GET path=%s status=%s",
        path,
        response.status_code,
    )

    if not response.is_success:
        logger.info(
            "GitHub API error",
            extra={
                "status": response.status_code,
                "reason": response.reason_phrase,
                "body": response.text,
            },
        )
        raise GitHubAPIError(response.status_code, response.reason_phrase, str(response.url))

    try:
        return response.json()
    except ValueError as exc:
        raise GitHubSchemaError(f"Response from {path} is not valid JSON: {exc}") from exc


def list_workflows_raw(client: httpx.Client, owner: str, repo: str) -> dict | list:
    return fetch_json(client, f"{_repo_path(owner, repo)}/actions/workflows")


def list_workflow_runs_raw(
    client: httpx.Client,
    owner: str,
    repo: str,
    workflow_id: int,
    per_page: int = 1,
) -> dict | list:
    return fetch_json(
        client,
        f"{_repo_path(owner, repo)}/actions/workflows/{workflow_id}/runs",
        params={"per_page": per_page},
    )
