"""Error types for GitHub service operations."""

from __future__ import annotations


class WorkflowReportError(RuntimeError):
    """Base class for errors raised while building a workflow report."""


class ConfigurationError(WorkflowReportError):
    """Raised when the environment configuration is invalid."""


class GitHubTransportError(WorkflowReportError):
    """Raised when a request to the GitHub API fails before a response arrives."""


class GitHubSchemaError(WorkflowReportError):
    """Raised when a GitHub API response body does not have the expected shape."""


class GitHubAPIError(WorkflowReportError):
    """Raised when the GitHub API answers with a non-success status."""

    def __init__(self, status_code: int, reason: str = "", url: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"{self.status}{f' for {url}' if url else ''}")

    @property
    def status(self) -> str:
        """Status line in the ``404 Not Found`` form."""
        return f"{self.status_code} {self.reason}".strip()
