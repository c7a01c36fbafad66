"""ComputeModule - Abstract base class for compute tasks."""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Generic

from .schema_job import P, Q
from .schema_job_record import JobRecord, JobRecordUpdate, JobStatus

logger = logging.getLogger(__name__)


class ComputeModule(ABC, Generic[P, Q]):
    """
    Stateless, template-method based compute module.

    - Params are validated once and passed through
    - run() does the work and writes its own output files
    - Q contains metadata only
    """

    schema: type[P]

    @property
    @abstractmethod
    def task_type(self) -> str: ...

    def setup(self) -> None:
        """Optional per-execution setup."""
        pass

    @abstractmethod
    async def run(
        self,
        params: P,
        progress_callback: Callable[[int], None] | None = None,
    ) -> Q:
        """
        Execute task.

        - May write files named by params
        - Must return metadata only
        """
        ...

    async def execute(
        self,
        job_record: JobRecord,
        progress_callback: Callable[[int], None] | None = None,
    ) -> JobRecordUpdate:
        try:
            params = self.schema.model_validate(job_record.params)

            self.setup()

            output = await self.run(params, progress_callback)

            return JobRecordUpdate(
                status=JobStatus.completed,
                output=output.model_dump(mode="json"),
                progress=100,
            )

        except FileNotFoundError as exc:
            logger.error(f"{self.task_type} job {job_record.job_id}: {exc}")
            return JobRecordUpdate(
                status=JobStatus.error,
                error_message=str(exc),
            )

        except Exception as exc:
            logger.exception(f"{self.task_type} job {job_record.job_id} failed: {exc}")
            return JobRecordUpdate(
                status=JobStatus.error,
                error_message=str(exc),
            )
