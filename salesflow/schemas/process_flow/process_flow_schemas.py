# salesflow/schemas/process_flow/process_flow_schemas.py

from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, computed_field

from salesflow.constants.activity_templates import ActivityKind
from salesflow.schemas.process_flow.snapshot_schemas import (
    CustomerRecord,
    EnquiryRecord,
    QuotationRecord,
    SalesOrderRecord,
)


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# =====================================================
# RESOLUTION / STAGE
# =====================================================

class ResolvedEntities(FrozenModel):
    target_quotation: Optional[QuotationRecord] = None
    customer: Optional[CustomerRecord] = None
    related_enquiry: Optional[EnquiryRecord] = None
    related_sales_order: Optional[SalesOrderRecord] = None


class StatusAction(FrozenModel):
    status: Optional[str]
    extra_completed_steps: Tuple[int, ...] = ()
    current_step: int
    label: Optional[str] = None
    description: Optional[str] = None
    action_verb: Optional[str] = None
    recognized: bool = True


class StageResult(FrozenModel):
    current_step: int
    completed_steps: Tuple[int, ...] = ()
    next_action: Optional[StatusAction] = None
    unknown_status: Optional[str] = None


# =====================================================
# TIMELINE
# =====================================================

class ActivityEvent(FrozenModel):
    kind: ActivityKind
    action: str
    description: str
    timestamp: datetime
    actor_hint: str
    entity_id: str


# =====================================================
# URGENT TASKS
# =====================================================

class TaskPriority(str, Enum):
    urgent = "urgent"
    high = "high"
    medium = "medium"


class UrgentTask(FrozenModel):
    title: str
    description: str
    priority: TaskPriority
    action_verb: str
    entity_type: str
    entity_id: str

    @computed_field
    @property
    def key(self) -> str:
        return f"{self.title}|{self.description}"


# =====================================================
# STEP OVERVIEW / VALIDATION
# =====================================================

class StepState(str, Enum):
    completed = "completed"
    current = "current"
    pending = "pending"


class StepOverview(FrozenModel):
    id: int
    name: str
    path: str
    status: StepState


class WorkflowValidation(FrozenModel):
    can_proceed: bool
    message: str
    step: str
    entity_id: str


# =====================================================
# FULL STATE
# =====================================================

class ProcessFlowState(FrozenModel):
    current_step: int
    current_step_name: str
    completed_steps: Tuple[int, ...] = ()
    progress_percent: float
    next_action: Optional[StatusAction] = None
    unknown_status: Optional[str] = None

    target_quotation: Optional[QuotationRecord] = None
    customer: Optional[CustomerRecord] = None
    related_enquiry: Optional[EnquiryRecord] = None
    related_sales_order: Optional[SalesOrderRecord] = None

    activity_timeline: List[ActivityEvent] = []
    urgent_tasks: List[UrgentTask] = []
    steps: List[StepOverview] = []
