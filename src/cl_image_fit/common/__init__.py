"""Common module - schemas and the compute module base class."""

from .compute_module import ComputeModule
from .schema_job import BaseJobParams, TaskOutput
from .schema_job_record import JobRecord, JobRecordUpdate, JobStatus

__all__ = [
    "BaseJobParams",
    "TaskOutput",
    "ComputeModule",
    "JobRecord",
    "JobRecordUpdate",
    "JobStatus",
]
