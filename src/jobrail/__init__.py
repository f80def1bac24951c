"""jobrail - functional error handling over a small job table.

Lookups return Option, conversions return Result, and derived values are
composed with map/flat_map so absence and failure propagate as values.

Quick Start:
    >>> from jobrail import CurrencyConverter, JobsService, LiveJobs
    >>> service = JobsService(LiveJobs(), CurrencyConverter())
    >>> service.salary_in_other_currency("2")
    Ok(109200.0)
    >>> service.salary_gap_vs_max("4")
    Some(35000.0)
    >>> service.sum_of_two_salaries("1", "42").unwrap_or(0.0)
    0.0
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import JobrailSettings, clear_settings_cache, get_settings
from .converter import CurrencyConverter
from .domain import JOBS_DATABASE, Company, Job, JobId, Role, Salary, build_database
from .errors import (
    ErrorCode,
    ErrorContext,
    ErrorTrace,
    Err,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    from_nullable,
)
from .observability import configure_logging, get_logger
from .repository import Jobs, LiveJobs
from .service import JobsService

__all__ = [
    "__version__",
    # Domain
    "Job", "JobId", "Company", "Role", "Salary", "JOBS_DATABASE", "build_database",
    # Components
    "Jobs", "LiveJobs", "CurrencyConverter", "JobsService",
    # Errors
    "Result", "Ok", "Err", "Option", "Some", "Nothing", "from_nullable",
    "ErrorCode", "ErrorContext", "ErrorTrace",
    # Ambient
    "JobrailSettings", "get_settings", "clear_settings_cache", "configure_logging", "get_logger",
]
