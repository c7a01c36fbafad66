from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, JsonValue

TaskParamsRecord = dict[str, JsonValue]
TaskOutputRecord = dict[str, JsonValue]


class JobStatus(str, Enum):
    """Outcome of a compute module execution."""

    completed = "completed"
    error = "error"


class JobRecord(BaseModel):
    """Serialized job as handed to a compute module."""

    job_id: str
    task_type: str

    params: TaskParamsRecord

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")


class JobRecordUpdate(BaseModel):
    status: JobStatus | None = None
    progress: int | None = Field(default=None, ge=0, le=100)
    output: TaskOutputRecord | None = None
    error_message: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
