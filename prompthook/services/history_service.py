from typing import Any, List, Optional

from sqlalchemy.orm import Session

from prompthook.models import ExecutionHistory


def append_execution(
    db: Session,
    *,
    prompt_id: int,
    trigger_type: str,
    input_data: Optional[dict[str, Any]],
    rendered_prompt: str,
    openai_response: Any,
    webhook_response_status: Optional[int],
    webhook_response_body: Optional[str],
    execution_status: str,
    error_message: Optional[str],
) -> ExecutionHistory:
    """Insert one execution record; id and created_at are assigned here."""
    record = ExecutionHistory(
        prompt_id=prompt_id,
        trigger_type=trigger_type,
        input_data=input_data,
        rendered_prompt=rendered_prompt,
        openai_response=openai_response,
        webhook_response_status=webhook_response_status,
        webhook_response_body=webhook_response_body,
        execution_status=execution_status,
        error_message=error_message,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def list_execution_history(db: Session, prompt_id: Optional[int] = None) -> List[ExecutionHistory]:
    """Newest first, optionally limited to one prompt."""
    query = db.query(ExecutionHistory)
    if prompt_id is not None:
        query = query.filter(ExecutionHistory.prompt_id == prompt_id)
    return query.order_by(ExecutionHistory.created_at.desc(), ExecutionHistory.id.desc()).all()
