"""Job records and the fixed dataset they live in."""

from .dataset import JOBS_DATABASE, REFERENCE_JOBS, build_database
from .models import Company, Job, JobId, Role, Salary

__all__ = [
    "Company",
    "Job",
    "JobId",
    "Role",
    "Salary",
    "JOBS_DATABASE",
    "REFERENCE_JOBS",
    "build_database",
]
