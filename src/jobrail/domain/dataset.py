"""The fixed in-memory job table.

JOBS_DATABASE is built once at import and exposed through a read-only
mapping proxy; nothing mutates it afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .models import Job, JobId


def build_database(jobs: Iterable[Job]) -> Mapping[JobId, Job]:
    """Key each job by its own id. Raises ValueError on a duplicate id.
    
    Iteration order follows the input order.
    """
    table: dict[JobId, Job] = {}
    for job in jobs:
        if job.id in table:
            raise ValueError(f"Duplicate job id: {job.id}")
        table[job.id] = job
    return MappingProxyType(table)


REFERENCE_JOBS: tuple[Job, ...] = (
    Job.create("1", "Google", "Software Engineer", 100000.0),
    Job.create("2", "Facebook", "Product Manager", 120000.0),
    Job.create("3", "Amazon", "Data Scientist", 110000.0),
    Job.create("4", "Microsoft", "Software Engineer", 95000.0),
    Job.create("5", "Apple", "Product Manager", 130000.0),
    Job.create("6", "Netflix", "Data Scientist", 115000.0),
)

JOBS_DATABASE: Mapping[JobId, Job] = build_database(REFERENCE_JOBS)
