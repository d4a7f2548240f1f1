"""Pydantic models for the GitHub Actions workflow endpoints."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WorkflowState(str, Enum):
    ACTIVE = "active"
    DISABLED = "disabled"


class Workflow(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int = Field(..., ge=0, description="Workflow identifier, unique per repository")
    name: str
    state: str = Field(..., description="Lifecycle state; unknown values are kept as-is")
    created_at: str
    updated_at: str

    @property
    def is_active(self) -> bool:
        return self.state == WorkflowState.ACTIVE.value

    @property
    def state_kind(self) -> Optional[WorkflowState]:
        """Known lifecycle state, or None when the API sent something else."""
        for state in WorkflowState:
            if self.state == state.value:
                return state
        return None


class WorkflowListResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    total_count: int
    workflows: List[Workflow]


class WorkflowRun(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    created_at: str
    status: str
    conclusion: Optional[str] = Field(
        default=None, description="Absent while the run has not concluded"
    )


class WorkflowRunListResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    total_count: int
    workflow_runs: List[WorkflowRun]
