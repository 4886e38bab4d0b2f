from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, JsonValue


class ExecutePromptRequest(BaseModel):
    prompt_id: int
    template_data: Optional[dict[str, JsonValue]] = None


class WebhookExecutionRequest(BaseModel):
    prompt_id: int
    payload: dict[str, JsonValue]


class ExecutionHistoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    prompt_id: int
    trigger_type: Literal["cron", "webhook"]
    input_data: Optional[dict[str, JsonValue]] = None
    rendered_prompt: str
    openai_response: JsonValue
    webhook_response_status: Optional[int] = None
    webhook_response_body: Optional[str] = None
    execution_status: Literal["success", "failed"]
    error_message: Optional[str] = None
    created_at: datetime
