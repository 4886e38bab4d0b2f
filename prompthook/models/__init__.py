from prompthook.models.execution_history import ExecutionHistory, ExecutionStatus, TriggerType
from prompthook.models.prompt import Prompt

__all__ = [
    "Prompt",
    "ExecutionHistory",
    "ExecutionStatus",
    "TriggerType",
]
