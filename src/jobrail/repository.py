"""Read-only access to the job table.

A missing id is absence, not an error: find_by_id returns Nothing().
find_by_id_or_err is the failure-wrapped variant for callers that want a
NOT_FOUND trace instead.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from .domain import JOBS_DATABASE, Job, JobId
from .errors import ErrorTrace, Option, Result, from_nullable, not_found
from .observability import get_logger

log = get_logger("jobrail.repository")


@runtime_checkable
class Jobs(Protocol):
    """Lookup operations over a job table."""
    
    def find_by_id(self, job_id: JobId | str) -> Option[Job]: ...
    def find_all(self) -> list[Job]: ...


class LiveJobs:
    """Jobs backed by an immutable mapping (the reference table by default)."""
    
    __slots__ = ("_database",)
    
    def __init__(self, database: Mapping[JobId, Job] = JOBS_DATABASE) -> None:
        self._database = database
    
    def find_by_id(self, job_id: JobId | str) -> Option[Job]:
        key = JobId.of(job_id)
        found = from_nullable(self._database.get(key))
        log.debug("lookup", job_id=key.value, found=found.is_some())
        return found
    
    def find_by_id_or_err(self, job_id: JobId | str) -> Result[Job, ErrorTrace]:
        key = JobId.of(job_id)
        return self.find_by_id(key).ok_or_else(
            lambda: not_found(f"Job {key} not found", "find_by_id", job_id=key.value)
        )
    
    def find_all(self) -> list[Job]:
        return list(self._database.values())
    
    def __len__(self) -> int:
        return len(self._database)
    
    def __repr__(self) -> str:
        return f"LiveJobs(size={len(self._database)})"
