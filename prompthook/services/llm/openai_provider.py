from typing import Any, Optional

import httpx

from prompthook.logging_config import get_logger
from prompthook.services.llm.base import CompletionResult, LLMProvider

logger = get_logger("llm.openai")

DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"
ERROR_DETAIL_LIMIT = 500


def _error_detail(data: Any, text: str) -> str:
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
    return (text or "")[:ERROR_DETAIL_LIMIT]


class OpenAIProvider(LLMProvider):
    """OpenAI chat-completions client.

    The API key is handed in by the caller and never checked here; a missing
    key simply produces an upstream 401 which is reported like any other
    failed completion.
    """

    def __init__(
        self,
        api_key: Optional[str],
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: Optional[float] = 60.0,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout_seconds = timeout_seconds

    def build_payload(
        self,
        model: str,
        prompt_text: str,
        temperature: float,
        top_p: float,
        frequency_penalty: float,
        presence_penalty: float,
        max_tokens: Optional[int] = None,
    ) -> dict:
        payload = {
            "model": model,
            "messages": [{"role": "user", "content": prompt_text}],
            "temperature": float(temperature),
            "top_p": float(top_p),
            "frequency_penalty": float(frequency_penalty),
            "presence_penalty": float(presence_penalty),
        }
        if max_tokens is not None:
            payload["max_tokens"] = int(max_tokens)
        return payload

    def complete(
        self,
        model: str,
        prompt_text: str,
        temperature: float,
        top_p: float,
        frequency_penalty: float,
        presence_penalty: float,
        max_tokens: Optional[int] = None,
    ) -> CompletionResult:
        payload = self.build_payload(
            model=model,
            prompt_text=prompt_text,
            temperature=temperature,
            top_p=top_p,
            frequency_penalty=frequency_penalty,
            presence_penalty=presence_penalty,
            max_tokens=max_tokens,
        )
        logger.debug(f"OpenAI request: model={model}, prompt_chars={len(prompt_text)}")

        try:
            with httpx.Client(timeout=self.timeout_seconds) as client:
                response = client.post(
                    self.api_url,
                    headers={
                        "Authorization": f"Bearer {self.api_key or ''}",
                        "Content-Type": "application/json",
                    },
                    json=payload,
                )
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.error(f"OpenAI request failed: {e}")
            return CompletionResult.failure(f"OpenAI request failed: {e}")

        logger.debug(f"OpenAI response status: {response.status_code}")

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            detail = _error_detail(data, response.text)
            logger.error(f"OpenAI error: {response.status_code} - {detail}")
            return CompletionResult.failure(
                f"OpenAI API error: {response.status_code} - {detail}",
                status_code=response.status_code,
                data=data,
            )

        if data is None:
            logger.error("OpenAI returned a non-JSON body")
            return CompletionResult.failure(
                "OpenAI request failed: malformed response body",
                status_code=response.status_code,
            )

        return CompletionResult.success(response.status_code, data)
