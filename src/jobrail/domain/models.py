"""Job record and its value types.

Each field is wrapped in its own frozen value type so an id can't be passed
where a company name is expected. Equality and hashing are by value.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class JobId:
    value: str

    @classmethod
    def of(cls, value: JobId | str) -> JobId:
        """Accept a JobId or its raw string form."""
        return value if isinstance(value, JobId) else cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Company:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Role:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, order=True)
class Salary:
    """Yearly salary in the source currency. Non-negative by convention, not checked."""

    value: float

    def __str__(self) -> str:
        return f"{self.value:.2f}"


@dataclass(frozen=True, slots=True)
class Job:
    """An immutable job listing."""

    id: JobId
    company: Company
    role: Role
    salary: Salary

    @classmethod
    def create(cls, job_id: str, company: str, role: str, salary: float) -> Job:
        """Build a Job from plain values."""
        return cls(JobId(job_id), Company(company), Role(role), Salary(float(salary)))
