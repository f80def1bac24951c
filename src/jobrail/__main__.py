"""Demo: print a few derived values. Run with `python -m jobrail`."""

from __future__ import annotations

from .config import get_settings
from .converter import CurrencyConverter
from .observability import configure_from_settings
from .repository import LiveJobs
from .service import JobsService


def main() -> None:
    settings = get_settings()
    configure_from_settings(settings.logging, level=settings.effective_log_level)
    converter = CurrencyConverter()
    service = JobsService(LiveJobs(), converter)

    job_id = "1"
    is_apple = service.is_from_organization(job_id, "Apple")
    print(f"Job {job_id} {'is' if is_apple else 'is not'} from Apple")

    # with JOBRAIL_DEBUG=true the log shows job 42 was searched for but never found
    total = service.sum_of_two_salaries("1", "42").unwrap_or(0.0)
    print(f"Sum of salaries of jobs: {total}")

    print(service.salary_in_other_currency("2").match(
        ok=lambda v: f"Salary of job 2 in {converter.target}: {v:.2f}",
        err=lambda e: f"Conversion failed: {e}",
    ))
    print(service.salary_gap_vs_max("4").match(
        some=lambda gap: f"Job 4 earns {gap:.2f} less than the best paid job",
        nothing=lambda: "Job 4 not found",
    ))


if __name__ == "__main__":
    main()
