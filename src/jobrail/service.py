"""Derived values over jobs, composed with Option and Result.

Every derivation is a chain of lookups and conversions. The first absent
job or failed conversion stops the chain, and later steps never run.
"""

from __future__ import annotations

from .converter import CurrencyConverter
from .domain import Job, JobId
from .errors import ErrorTrace, Ok, Option, Result, from_nullable
from .observability import get_logger
from .repository import Jobs

log = get_logger("jobrail.service")


class JobsService:
    """Salary derivations over a Jobs repository.
    
    Example:
        >>> service = JobsService(LiveJobs(), CurrencyConverter())
        >>> service.salary_of("2")
        120000.0
        >>> service.sum_of_two_salaries("1", "42")
        Nothing()
    """
    
    __slots__ = ("_jobs", "_converter")
    
    def __init__(self, jobs: Jobs, converter: CurrencyConverter) -> None:
        self._jobs = jobs
        self._converter = converter
    
    def salary_of(self, job_id: JobId | str) -> float:
        """Salary of the job, 0.0 if it does not exist."""
        return self._jobs.find_by_id(job_id).map(lambda job: job.salary.value).unwrap_or(0.0)
    
    def salary_in_other_currency(self, job_id: JobId | str) -> Result[float, ErrorTrace]:
        """Converted salary; Ok(0.0) if the job does not exist.
        
        A conversion failure is returned as Err with this operation and the
        job id pushed onto its trace.
        """
        return self._jobs.find_by_id(job_id).match(some=self._convert_salary, nothing=lambda: Ok(0.0))
    
    def is_from_organization(self, job_id: JobId | str, name: str) -> bool:
        """True iff the job exists and its company name equals name exactly."""
        return self._jobs.find_by_id(job_id).filter(lambda job: job.company.name == name).is_some()
    
    def sum_of_two_salaries(self, first: JobId | str, second: JobId | str) -> Option[float]:
        """Sum of both salaries, or Nothing() if either job is missing.
        
        The second job is only looked up once the first has been found.
        """
        return self._find_logged(first).flat_map(
            lambda job1: self._find_logged(second).map(lambda job2: job1.salary.value + job2.salary.value)
        )
    
    def max_salary(self) -> Option[float]:
        """Highest salary in the table, Nothing() if the table is empty."""
        return from_nullable(max((job.salary.value for job in self._jobs.find_all()), default=None))
    
    def salary_gap_vs_max(self, job_id: JobId | str) -> Option[float]:
        """max_salary() minus this job's salary, Nothing() if the job is missing."""
        return self._jobs.find_by_id(job_id).flat_map(
            lambda job: self.max_salary().map(lambda top: top - job.salary.value)
        )
    
    def _find_logged(self, job_id: JobId | str) -> Option[Job]:
        key = JobId.of(job_id)
        step = log.bind(job_id=key.value)
        step.debug("searching for job")
        return self._jobs.find_by_id(key).inspect(lambda job: step.debug("job found", company=job.company.name))
    
    def _convert_salary(self, job: Job) -> Result[float, ErrorTrace]:
        return (
            self._converter.convert(job.salary.value)
            .map_err(lambda e: e.with_operation("salary_in_other_currency", job_id=job.id.value))
            .inspect_err(lambda e: log.warning("conversion failed", job_id=job.id.value, error=e.message))
        )
