from typing import Dict

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import JsonValue
from sqlalchemy.orm import Session

from prompthook.database import get_db
from prompthook.logging_config import get_logger
from prompthook.models import ExecutionHistory
from prompthook.schemas.execution import ExecutionHistoryResponse, WebhookExecutionRequest
from prompthook.services.execution_service import execute_webhook, get_default_provider
from prompthook.services.llm import LLMProvider
from prompthook.services.prompt_service import PromptInactiveError, PromptNotFoundError

logger = get_logger("webhook")

router = APIRouter(tags=["webhook"])


def _run_webhook(db: Session, prompt_id: int, payload: dict, provider: LLMProvider) -> ExecutionHistory:
    logger.info(f"Webhook received: prompt_id={prompt_id}", extra={"context": {"keys": sorted(payload)}})
    try:
        return execute_webhook(db, prompt_id, payload, provider=provider)
    except PromptNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except PromptInactiveError as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.post("/webhook", response_model=ExecutionHistoryResponse)
def handle_webhook(
    request: WebhookExecutionRequest,
    db: Session = Depends(get_db),
    provider: LLMProvider = Depends(get_default_provider),
):
    """Wrapped form: ``{"prompt_id": ..., "payload": {...}}``."""
    return _run_webhook(db, request.prompt_id, request.payload, provider)


@router.post("/webhook/{prompt_id}", response_model=ExecutionHistoryResponse)
def handle_webhook_direct(
    prompt_id: int,
    payload: Dict[str, JsonValue] = Body(...),
    db: Session = Depends(get_db),
    provider: LLMProvider = Depends(get_default_provider),
):
    """Direct form: the whole JSON object body is the payload."""
    return _run_webhook(db, prompt_id, payload, provider)


@router.get("/webhook/{prompt_id}")
def handle_webhook_probe(prompt_id: int):
    """Probe for webhook configuration UIs; real calls must use POST."""
    return {"ok": True, "message": "Use POST with JSON payload", "prompt_id": prompt_id}
