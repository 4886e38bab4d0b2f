from prompthook.services.delivery_service import DeliveryResult, deliver_payload
from prompthook.services.execution_service import (
    PayloadShaping,
    execute_prompt,
    execute_webhook,
    run_execution,
)
from prompthook.services.history_service import append_execution, list_execution_history
from prompthook.services.prompt_service import (
    PromptError,
    PromptInactiveError,
    PromptNotFoundError,
    create_prompt,
    delete_prompt,
    get_prompt,
    list_prompts,
    update_prompt,
)
from prompthook.services.template_service import find_placeholders, format_value, render_template
