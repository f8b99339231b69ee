"""
Result data models for routing runs.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from pathlib import Path
from typing import List, Optional


class ExitStatus(IntEnum):
    """Process exit codes."""
    SUCCESS = 0
    USAGE_ERROR = 1
    FILESYSTEM_ERROR = 2


class StepStatus(Enum):
    DONE = "done"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class StepResult:
    """
    Outcome of one step of the routing sequence.

    Attributes:
        step: Step name ("snapshot", "copy_spool_a", "move_spool_b", "cleanup")
        status: Whether the step acted, had nothing to do, or failed
        destination: Path written by the step, if any
        error: Error text for failed steps
    """

    step: str
    status: StepStatus
    destination: Optional[Path] = None
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status is StepStatus.FAILED


@dataclass
class RouteResult:
    """
    Outcome of a whole routing run, steps in execution order.
    """

    steps: List[StepResult] = field(default_factory=list)
    snapshot_left: bool = False

    @property
    def exit_status(self) -> ExitStatus:
        if any(step.failed for step in self.steps):
            return ExitStatus.FILESYSTEM_ERROR
        return ExitStatus.SUCCESS

    def get_step(self, name: str) -> Optional[StepResult]:
        """Return the result for a step name, or None if it never ran."""
        for step in self.steps:
            if step.step == name:
                return step
        return None

    @property
    def delivered_to(self) -> List[Path]:
        """Final files written to spool directories during the run."""
        return [
            step.destination
            for step in self.steps
            if step.status is StepStatus.DONE
            and step.step in ("copy_spool_a", "move_spool_b")
            and step.destination is not None
        ]
