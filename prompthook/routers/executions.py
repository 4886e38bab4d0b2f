from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from prompthook.database import get_db
from prompthook.schemas.execution import ExecutePromptRequest, ExecutionHistoryResponse
from prompthook.services.execution_service import execute_prompt, get_default_provider
from prompthook.services.history_service import list_execution_history
from prompthook.services.llm import LLMProvider
from prompthook.services.prompt_service import PromptInactiveError, PromptNotFoundError

router = APIRouter(tags=["executions"])


@router.post("/execute", response_model=ExecutionHistoryResponse)
def execute(
    request: ExecutePromptRequest,
    db: Session = Depends(get_db),
    provider: LLMProvider = Depends(get_default_provider),
):
    """Run a prompt manually or from an external scheduler."""
    try:
        return execute_prompt(db, request.prompt_id, request.template_data, provider=provider)
    except PromptNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except PromptInactiveError as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.get("/executions", response_model=List[ExecutionHistoryResponse])
def get_execution_history(
    prompt_id: Optional[int] = Query(default=None),
    db: Session = Depends(get_db),
):
    return list_execution_history(db, prompt_id)
