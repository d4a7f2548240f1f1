"""Command-line entry point for the workflow report."""

from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .config import Settings, load_settings
from .services.github_client import build_client
from .services.github_errors import ConfigurationError, GitHubAPIError, WorkflowReportError
from .services.report import render_report
from .services.workflows import list_workflows

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FETCH_FAILED = 1
EXIT_USAGE = 2


def configure_logging(level: int) -> None:
    """Send log records to stderr as plain text, keeping stdout for the report."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger("workflow_report")
    root.handlers = [handler]
    # Warnings are part of the report's output; the level can only add detail.
    root.setLevel(min(level, logging.WARNING))
    root.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workflow-report",
        description="Fetch and display GitHub Actions workflows with their latest run.",
    )
    parser.add_argument("-o", "--owner", required=True, help="Repository owner")
    parser.add_argument("-r", "--repo", required=True, help="Repository name")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(owner: str, repo: str, settings: Settings) -> int:
    """Fetch the workflow list for ``owner/repo`` and print the report."""
    print(f"🔍 Fetching workflows for {owner}/{repo}...\n")

    with build_client(settings) as client:
        try:
            workflows = list_workflows(client, owner, repo)
        except GitHubAPIError as exc:
            print(f"❌ Request failed with status: {exc.status}")
            return EXIT_FETCH_FAILED
        except WorkflowReportError as exc:
            print(f"❌ {exc}")
            return EXIT_FETCH_FAILED

        render_report(client, workflows, owner, repo)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return EXIT_USAGE

    configure_logging(settings.log_level)
    logger.debug("Using GitHub API at %s", settings.api_url)
    return run(args.owner, args.repo, settings)


if __name__ == "__main__":
    raise SystemExit(main())
