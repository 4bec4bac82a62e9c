# salesflow/routers/__init__.py

from .process_flow.process_flow_router import router as process_flow_router
from .process_flow.dashboard_router import router as dashboard_router
from .process_flow.workflow_router import router as workflow_router


__all__ = [
"process_flow_router",
"dashboard_router",
"workflow_router",
]
