from prompthook.services.llm.base import CompletionResult, LLMProvider, extract_completion_text
from prompthook.services.llm.openai_provider import OpenAIProvider

__all__ = ["LLMProvider", "CompletionResult", "OpenAIProvider", "extract_completion_text"]
