"""Job descriptions and job files."""

from ffcmd.jobs.loader import JobFileError, load_job, load_job_from_dict
from ffcmd.jobs.models import Job

__all__ = ["Job", "JobFileError", "load_job", "load_job_from_dict"]
