from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence

from .errors import StepFailure
from .state_store import is_step_completed, mark_step_completed

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single step of the install workflow."""

    step_id: str

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class StepOutcome:
    step_id: str
    ok: bool
    returncode: Optional[int] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]
    skipped_steps: List[str]
    failed_steps: List[str] = field(default_factory=list)
    outcomes: List[StepOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed_steps


def run_pipeline(
    *,
    state: Dict[str, Any],
    steps: Sequence[Step],
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
    resume: bool = False,
    strict: bool = True,
) -> PipelineResult:
    """Run steps in order, stopping at the first failure.

    With strict=False a StepFailure from any step but the last is logged
    and the run continues; the last step's failure still propagates.
    Steps recorded as completed are skipped only when resume=True, and
    never when the step sets resumable = False.
    Errors other than StepFailure (ToolMissing included) always abort.
    """

    known = {s.step_id for s in steps}
    for name, sid in (("start_at", start_at), ("stop_after", stop_after)):
        if sid is not None and sid not in known:
            raise ValueError(f"Unknown step for {name}: {sid}")

    ran: List[str] = []
    skipped: List[str] = []
    failed: List[str] = []
    outcomes: List[StepOutcome] = []

    started = start_at is None
    # The last step that will actually run; its failure always propagates.
    last_id = stop_after or (steps[-1].step_id if steps else None)

    for step in steps:
        if not started:
            if step.step_id == start_at:
                started = True
            else:
                continue

        state.setdefault("execution", {})["current_step"] = step.step_id

        if resume and getattr(step, "resumable", True) and is_step_completed(state, step.step_id):
            logger.info("Skipping step %s (already completed)", step.step_id)
            skipped.append(step.step_id)
        else:
            logger.info("Running step %s", step.step_id)
            try:
                state = step.run(state)
            except StepFailure as e:
                failed.append(step.step_id)
                outcomes.append(
                    StepOutcome(step_id=step.step_id, ok=False, returncode=e.returncode, message=str(e))
                )
                if strict or step.step_id == last_id:
                    raise
                logger.warning("Step %s failed, continuing (lax mode): %s", step.step_id, e)
                state.setdefault("execution", {}).setdefault("errors", []).append(
                    {"step": step.step_id, "error": str(e), "returncode": e.returncode}
                )
            else:
                mark_step_completed(state, step.step_id)
                ran.append(step.step_id)
                outcomes.append(StepOutcome(step_id=step.step_id, ok=True, returncode=0))

        if stop_after is not None and step.step_id == stop_after:
            logger.info("Stopping after %s", stop_after)
            break

    state.setdefault("execution", {})["current_step"] = None
    return PipelineResult(
        state=state,
        ran_steps=ran,
        skipped_steps=skipped,
        failed_steps=failed,
        outcomes=outcomes,
    )
