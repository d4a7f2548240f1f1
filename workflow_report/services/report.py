"""Text rendering of the workflow summary."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from datetime import tzinfo
from typing import TextIO

import httpx

from ..schemas.workflows import Workflow, WorkflowListResponse, WorkflowState
from .github_errors import WorkflowReportError
from .timestamps import Parsed, format_local, parse_or_raw
from .workflows import get_last_run_timestamp

logger = logging.getLogger(__name__)

HEADER = "🔧 GitHub Workflows Summary"
HEADER_RULE = "═" * 27
SEPARATOR = "━" * 52

STATE_MARKERS = {
    WorkflowState.ACTIVE: "✅",
    WorkflowState.DISABLED: "❌",
}
UNRECOGNIZED_STATE_MARKER = "❓"
NEVER_RUN = "Never run ⏸️"


@dataclass
class ReportSummary:
    rendered: int = 0
    never_run: int = 0
    fetch_errors: int = 0
    unparsed_timestamps: int = 0


def state_marker(workflow: Workflow) -> str:
    kind = workflow.state_kind
    if kind is None:
        return UNRECOGNIZED_STATE_MARKER
    return STATE_MARKERS[kind]


def _display_timestamp(raw: str, summary: ReportSummary, tz: tzinfo | None) -> str:
    parsed = parse_or_raw(raw)
    if isinstance(parsed, Parsed):
        try:
            return format_local(parsed.instant, tz)
        except OverflowError:
            logger.debug("%s falls outside the date range in the display timezone", raw)
    summary.unparsed_timestamps += 1
    logger.warning("⚠️  Could not parse date format: %s", raw)
    return f"{raw} (raw format)"


def _display_last_run(
    client: httpx.Client,
    owner: str,
    repo: str,
    workflow: Workflow,
    summary: ReportSummary,
    tz: tzinfo | None,
) -> str:
    try:
        last_run = get_last_run_timestamp(client, owner, repo, workflow.id)
    except WorkflowReportError as exc:
        summary.fetch_errors += 1
        logger.debug("Run fetch failed for workflow %s", workflow.id, exc_info=True)
        return f"Error fetching run data: {exc} ❌"

    if last_run is None:
        summary.never_run += 1
        return NEVER_RUN
    return _display_timestamp(last_run, summary, tz)


def render_workflow(
    client: httpx.Client,
    owner: str,
    repo: str,
    position: int,
    workflow: Workflow,
    out: TextIO,
    summary: ReportSummary,
    tz: tzinfo | None = None,
) -> None:
    """Write the block for one workflow; run fetch failures stay inside it."""
    print(f"🚀 Workflow #{position}", file=out)
    print(f"📝 Name: {workflow.name}", file=out)
    print(f"{state_marker(workflow)} State: {workflow.state}", file=out)
    print(f"🔄 Is Active: {'Yes ✅' if workflow.is_active else 'No ❌'}", file=out)
    print(f"🎂 Created: {_display_timestamp(workflow.created_at, summary, tz)}", file=out)
    print(f"📅 Last Updated: {_display_timestamp(workflow.updated_at, summary, tz)}", file=out)
    # Partial line stays visible while the run fetch blocks.
    print("🏃 Last Run: ", end="", file=out, flush=True)
    print(_display_last_run(client, owner, repo, workflow, summary, tz), file=out)
    print(SEPARATOR, file=out)
    print(file=out)
    summary.rendered += 1


def render_report(
    client: httpx.Client,
    workflows: WorkflowListResponse,
    owner: str,
    repo: str,
    out: TextIO | None = None,
    tz: tzinfo | None = None,
) -> ReportSummary:
    """Write the full summary, one block per workflow in API order."""
    out = out or sys.stdout
    summary = ReportSummary()

    print(HEADER, file=out)
    print(HEADER_RULE, file=out)
    print(f"📊 Total workflows: {workflows.total_count}\n", file=out)

    for position, workflow in enumerate(workflows.workflows, start=1):
        render_workflow(client, owner, repo, position, workflow, out, summary, tz)

    logger.info(
        "Rendered workflow report",
        extra={
            "rendered": summary.rendered,
            "never_run": summary.never_run,
            "fetch_errors": summary.fetch_errors,
        },
    )
    return summary
