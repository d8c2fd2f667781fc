import pytest
from pydantic_ai.messages import ModelMessage, ModelResponse, TextPart
from pydantic_ai.models.function import AgentInfo, FunctionModel

from wa_relay.completion import CompletionClient, SYSTEM_PROMPT
from wa_relay.errors import CompletionError


@pytest.mark.asyncio
async def test_reply_is_stripped_and_prompted():
    seen = []

    def respond(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        seen.append(messages)
        return ModelResponse(parts=[TextPart("  ¡Hola! ¿Cómo estás?\n")])

    client = CompletionClient("test_key", model=FunctionModel(respond))

    reply = await client.reply("Hola")

    assert reply == "¡Hola! ¿Cómo estás?"
    parts = seen[0][0].parts
    assert parts[0].content == SYSTEM_PROMPT
    assert parts[-1].content == "Hola"


@pytest.mark.asyncio
async def test_failure_raises_completion_error(caplog):
    def respond(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        raise RuntimeError("429 Too Many Requests")

    client = CompletionClient("test_key", model=FunctionModel(respond))

    with pytest.raises(CompletionError) as exc_info:
        await client.reply("Hola")

    assert exc_info.value.service == "completion"
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert "Completion failed" in caplog.text
