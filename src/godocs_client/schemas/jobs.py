"""Schemas for background jobs."""

from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class JobStatus(str, Enum):
    """Lifecycle status of a background job."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class JobType(str, Enum):
    """Kinds of background job the server runs."""

    INGESTION = "ingestion"
    CLEANUP = "cleanup"
    WORDCLOUD = "wordcloud"
    SEARCH_REINDEX = "search_reindex"


class Job(BaseModel):
    """A background job as reported by /api/jobs and /api/jobs/active.

    ``type`` and ``status`` stay plain strings so that a newer server can
    introduce values without breaking older clients.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    type: str
    status: str
    progress: int = 0
    current_step: str = Field(default="", validation_alias=AliasChoices("currentStep", "current_step"))
    total_steps: int = Field(default=0, validation_alias=AliasChoices("totalSteps", "total_steps"))
    message: str = ""
    error: str = ""
    result: str = ""
    created_at: str = Field(default="", validation_alias=AliasChoices("createdAt", "created_at"))
    updated_at: str = Field(default="", validation_alias=AliasChoices("updatedAt", "updated_at"))
    started_at: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("startedAt", "started_at")
    )
    completed_at: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("completedAt", "completed_at")
    )
