from prompthook.schemas.execution import (
    ExecutePromptRequest,
    ExecutionHistoryResponse,
    WebhookExecutionRequest,
)
from prompthook.schemas.prompt import DeletePromptResponse, PromptCreate, PromptResponse, PromptUpdate

__all__ = [
    "PromptCreate",
    "PromptUpdate",
    "PromptResponse",
    "DeletePromptResponse",
    "ExecutePromptRequest",
    "WebhookExecutionRequest",
    "ExecutionHistoryResponse",
]
