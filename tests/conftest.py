"""Shared test fixtures and configuration."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Generator, List

import httpx
import pytest

API_URL = "https://api.github.test"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of the tests."""
    for key in (
        "GITHUB_API_URL",
        "WORKFLOW_REPORT_USER_AGENT",
        "WORKFLOW_REPORT_TIMEOUT",
        "WORKFLOW_REPORT_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo configure_logging so caplog keeps seeing records."""
    yield
    package_logger = logging.getLogger("workflow_report")
    package_logger.handlers = []
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def requests_seen() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(requests_seen) -> Callable[[Dict[str, object]], httpx.Client]:
    """Build an httpx client whose responses come from a path -> response map.

    Values may be an ``httpx.Response`` or an exception to raise. Unknown paths
    answer 404.
    """
    clients: List[httpx.Client] = []

    def _make(routes: Dict[str, object]) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            route = routes.get(request.url.path)
            if route is None:
                return httpx.Response(404, json={"message": "Not Found"})
            if isinstance(route, Exception):
                raise route
            return route

        client = httpx.Client(
            base_url=API_URL,
            headers={"User-Agent": "workflow-report-tests"},
            transport=httpx.MockTransport(handler),
        )
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


def workflow_payload(
    workflow_id: int,
    name: str,
    state: str = "active",
    created_at: str = "2023-06-01T08:00:00.000Z",
    updated_at: str = "2023-07-02T09:15:00.000Z",
) -> dict:
    return {
        "id": workflow_id,
        "node_id": f"W_{workflow_id}",
        "name": name,
        "path": f".github/workflows/{name.lower()}.yml",
        "state": state,
        "created_at": created_at,
        "updated_at": updated_at,
        "url": f"{API_URL}/repos/octo/hello/actions/workflows/{workflow_id}",
        "badge_url": f"https://github.test/octo/hello/workflows/{name}/badge.svg",
    }


def run_payload(
    created_at: str = "2024-01-15T10:30:00Z",
    status: str = "completed",
    conclusion: str | None = "success",
) -> dict:
    return {
        "id": 30433642,
        "name": "Build",
        "head_branch": "main",
        "created_at": created_at,
        "status": status,
        "conclusion": conclusion,
        "run_number": 562,
    }


@pytest.fixture
def sample_workflow_list() -> dict:
    """Two workflows, as returned by GET /repos/{owner}/{repo}/actions/workflows."""
    return {
        "total_count": 2,
        "workflows": [
            workflow_payload(161335, "CI"),
            workflow_payload(269289, "Release", state="disabled"),
        ],
    }


@pytest.fixture
def sample_run_list() -> dict:
    return {"total_count": 562, "workflow_runs": [run_payload()]}


@pytest.fixture
def empty_run_list() -> dict:
    return {"total_count": 0, "workflow_runs": []}


@pytest.fixture
def make_workflow() -> Callable[..., dict]:
    return workflow_payload


@pytest.fixture
def make_run() -> Callable[..., dict]:
    return run_payload
