from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class CopyFailure:
    """A copy that failed; the run carried on without it."""

    source: Path
    destination: Path
    error: Exception


@dataclass
class OrganizeResult:
    processed: int = 0
    copied: int = 0
    failures: list[CopyFailure] = field(default_factory=list)
