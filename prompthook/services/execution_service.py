"""Prompt execution pipeline.

One run fetches the prompt, renders its template, calls the completion
provider, forwards the result to the prompt's destination webhook and appends
exactly one execution record. Once a prompt is known to exist and be active,
every outcome is recorded rather than raised; only a missing or inactive
prompt aborts before anything is written.
"""

from enum import Enum
from typing import Any, Mapping, Optional

from sqlalchemy.orm import Session

from prompthook.config import settings
from prompthook.logging_config import bind_context, get_logger
from prompthook.models import ExecutionHistory, ExecutionStatus, Prompt, TriggerType
from prompthook.services.delivery_service import deliver_payload
from prompthook.services.history_service import append_execution
from prompthook.services.llm import LLMProvider, OpenAIProvider, extract_completion_text
from prompthook.services.prompt_service import PromptInactiveError, PromptNotFoundError, get_prompt
from prompthook.services.template_service import find_placeholders, render_template

logger = get_logger("execution_service")

NO_CONTENT_ERROR = "No content received from OpenAI API"


class PayloadShaping(str, Enum):
    FORWARD_FULL_RESPONSE = "forward_full_response"
    FORWARD_EXTRACTED_TEXT = "forward_extracted_text"


def get_default_provider() -> LLMProvider:
    return OpenAIProvider(
        api_key=settings.openai_api_key,
        api_url=settings.openai_api_url,
        timeout_seconds=settings.completion_timeout_seconds,
    )


def _fetch_active_prompt(db: Session, prompt_id: int) -> Prompt:
    prompt = get_prompt(db, prompt_id)
    if not prompt:
        raise PromptNotFoundError(prompt_id)
    if not prompt.is_active:
        raise PromptInactiveError(prompt_id)
    return prompt


def build_delivery_payload(
    shaping: PayloadShaping,
    prompt_id: int,
    rendered_prompt: str,
    completion_data: Any,
    generated_text: Optional[str],
    data: Optional[Mapping[str, Any]],
) -> dict:
    if shaping == PayloadShaping.FORWARD_EXTRACTED_TEXT:
        return {
            "prompt_id": prompt_id,
            "rendered_prompt": rendered_prompt,
            "generated_text": generated_text,
            "payload": data,
        }
    return {
        "prompt_id": prompt_id,
        "rendered_prompt": rendered_prompt,
        "openai_response": completion_data,
        "template_data": data,
    }


def run_execution(
    db: Session,
    prompt_id: int,
    data: Optional[Mapping[str, Any]],
    trigger_type: TriggerType,
    shaping: PayloadShaping,
    provider: LLMProvider,
) -> ExecutionHistory:
    """Execute a prompt once and persist the outcome.

    Raises:
        PromptNotFoundError: no prompt with ``prompt_id``
        PromptInactiveError: the prompt exists but ``is_active`` is false
    """
    log = bind_context(logger, prompt_id=prompt_id, trigger_type=trigger_type.value)

    prompt = _fetch_active_prompt(db, prompt_id)
    input_data = dict(data) if data is not None else None

    rendered_prompt = render_template(prompt.prompt_text, input_data)
    unresolved = [name for name in find_placeholders(prompt.prompt_text) if name not in (input_data or {})]
    if unresolved:
        log.debug("Unresolved placeholders left in prompt", context={"placeholders": unresolved})

    completion = provider.complete(
        model=prompt.model,
        prompt_text=rendered_prompt,
        temperature=float(prompt.temperature),
        top_p=float(prompt.top_p),
        frequency_penalty=float(prompt.frequency_penalty),
        presence_penalty=float(prompt.presence_penalty),
        max_tokens=prompt.max_tokens,
    )

    webhook_status: Optional[int] = None
    webhook_body: Optional[str] = None
    error_message: Optional[str] = None

    if not completion.ok:
        error_message = completion.error or "OpenAI API error"
        openai_response = completion.data if completion.data is not None else {"error": error_message}
        log.warning("Completion failed", context={"error": error_message, "status": completion.status_code})
    else:
        openai_response = completion.data
        generated_text = extract_completion_text(completion.data)

        if shaping == PayloadShaping.FORWARD_EXTRACTED_TEXT and generated_text is None:
            error_message = NO_CONTENT_ERROR
            log.warning("Completion returned no content")
        else:
            payload = build_delivery_payload(
                shaping, prompt_id, rendered_prompt, completion.data, generated_text, input_data
            )
            delivery = deliver_payload(prompt.destination_webhook_url, payload)
            webhook_status = delivery.status_code
            webhook_body = delivery.body

            if delivery.error is not None:
                error_message = f"Webhook delivery error: {delivery.error}"
            elif not delivery.ok:
                error_message = f"Webhook delivery failed with status {delivery.status_code}"

            if error_message:
                log.warning("Webhook delivery failed", context={"error": error_message})

    execution_status = ExecutionStatus.FAILED if error_message else ExecutionStatus.SUCCESS

    record = append_execution(
        db,
        prompt_id=prompt_id,
        trigger_type=trigger_type.value,
        input_data=input_data,
        rendered_prompt=rendered_prompt,
        openai_response=openai_response,
        webhook_response_status=webhook_status,
        webhook_response_body=webhook_body,
        execution_status=execution_status.value,
        error_message=error_message,
    )
    log.info(
        "Execution recorded",
        context={"execution_id": record.id, "status": execution_status.value, "webhook_status": webhook_status},
    )
    return record


def execute_prompt(
    db: Session,
    prompt_id: int,
    template_data: Optional[Mapping[str, Any]] = None,
    provider: Optional[LLMProvider] = None,
) -> ExecutionHistory:
    """Manual or scheduled run; the full completion response is forwarded."""
    return run_execution(
        db,
        prompt_id,
        template_data,
        trigger_type=TriggerType.CRON,
        shaping=PayloadShaping.FORWARD_FULL_RESPONSE,
        provider=provider or get_default_provider(),
    )


def execute_webhook(
    db: Session,
    prompt_id: int,
    payload: Mapping[str, Any],
    provider: Optional[LLMProvider] = None,
) -> ExecutionHistory:
    """Inbound-webhook run; only the generated text is forwarded."""
    return run_execution(
        db,
        prompt_id,
        payload,
        trigger_type=TriggerType.WEBHOOK,
        shaping=PayloadShaping.FORWARD_EXTRACTED_TEXT,
        provider=provider or get_default_provider(),
    )
