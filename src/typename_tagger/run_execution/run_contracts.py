"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RunRequest:
    """Input contract for annotating one fixture file."""

    config_path: str
    input_path: str
    output_path: str
    parent_type_name: str | None = None
    property_of_parent: str | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed annotation run."""

    output_path: Path
    root_count: int
