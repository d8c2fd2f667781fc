import logging
from typing import Optional

from pydantic_ai import Agent
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider

from ..errors import CompletionError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "Eres un asistente conversacional amable y conciso para WhatsApp."


class CompletionClient:
    def __init__(
        self,
        api_key: str,
        model_name: str = "gpt-4o-mini",
        model: Optional[Model] = None,
    ):
        """
        Args:
            api_key: OpenAI API key
            model_name: Chat completion model to use
            model: Pre-built model, overrides api_key/model_name
        """
        if model is None:
            model = OpenAIChatModel(
                model_name, provider=OpenAIProvider(api_key=api_key)
            )

        self.agent = Agent(
            model=model,
            system_prompt=SYSTEM_PROMPT,
            output_type=str,
            model_settings={"temperature": 0.7, "max_tokens": 500},
        )

    async def reply(self, message: str) -> str:
        """
        Generate a conversational reply to an inbound message

        Raises:
            CompletionError: If the completion API fails for any reason
        """
        try:
            result = await self.agent.run(message)
        except Exception as exc:
            logger.warning(f"Completion failed: {type(exc).__name__}: {exc}")
            raise CompletionError(str(exc)) from exc

        return result.output.strip()
