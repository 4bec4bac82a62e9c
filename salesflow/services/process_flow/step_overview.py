from typing import Iterable, List

from salesflow.constants.workflow_steps import WORKFLOW_STEPS
from salesflow.schemas.process_flow.process_flow_schemas import (
    StepOverview,
    StepState,
)


def build_step_overview(
    current_step: int,
    completed_steps: Iterable[int],
) -> List[StepOverview]:
    completed = set(completed_steps)
    overview = []

    for step, name, path in WORKFLOW_STEPS:
        if step in completed:
            state = StepState.completed
        elif step == current_step:
            state = StepState.current
        else:
            state = StepState.pending
        overview.append(
            StepOverview(id=int(step), name=name, path=path, status=state)
        )

    return overview


def progress_percent(current_step: int, completed_steps: Iterable[int]) -> float:
    """Completed steps plus the one in progress, over the whole catalogue."""
    done = len(set(completed_steps)) + (1 if current_step > 0 else 0)
    return round(min(done / len(WORKFLOW_STEPS), 1.0) * 100, 1)
