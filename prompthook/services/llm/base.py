from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class CompletionResult:
    ok: bool
    status_code: Optional[int] = None
    data: Optional[Any] = None
    error: Optional[str] = None

    @staticmethod
    def success(status_code: int, data: Any) -> "CompletionResult":
        return CompletionResult(ok=True, status_code=status_code, data=data)

    @staticmethod
    def failure(error: str, status_code: Optional[int] = None, data: Any = None) -> "CompletionResult":
        return CompletionResult(ok=False, status_code=status_code, data=data, error=error)


class LLMProvider(ABC):
    """Abstract base class for chat-completion providers."""

    @abstractmethod
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
        """Run one completion. Failures are returned, not raised."""
        pass


def extract_completion_text(data: Any) -> Optional[str]:
    """Return ``choices[0].message.content`` or None when missing or empty."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    choice = choices[0]
    if not isinstance(choice, dict):
        return None
    message = choice.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if not isinstance(content, str) or not content:
        return None
    return content
