"""Run execution domain exports."""

from .annotation_run_use_case import RunExecutionError, execute_annotation_run
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_annotation_run",
]
