from .client import CompletionClient, SYSTEM_PROMPT

__all__ = ["CompletionClient", "SYSTEM_PROMPT"]
