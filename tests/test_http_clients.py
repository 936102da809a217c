"""Tests for the OpenAI chat adapter."""

import asyncio

import pytest

from macro_tracker.adapters.openai_chat_client import OpenAIChatClient


class _FakeCompletions:
    def __init__(self, content: str | None, with_choice: bool = True) -> None:
        self.content = content
        self.with_choice = with_choice
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        message = type("Message", (), {"content": self.content})()
        choices = [type("Choice", (), {"message": message})()]
        return type("Resp", (), {"choices": choices if self.with_choice else []})()


class _FakeOpenAI:
    def __init__(self, completions: _FakeCompletions) -> None:
        self.chat = type("Chat", (), {"completions": completions})()
        self.closed = False

    async def close(self) -> None:
        self.closed = True


def test_openai_chat_client_returns_content() -> None:
    completions = _FakeCompletions('{"name": "Egg", "calories": 70}')
    fake = _FakeOpenAI(completions)
    client = OpenAIChatClient(client=fake)

    reply = asyncio.run(
        client.complete(
            model="gpt-4o",
            messages=[{"role": "user", "content": "Analyze this food: egg"}],
            max_tokens=500,
        )
    )
    asyncio.run(client.close())

    assert reply == '{"name": "Egg", "calories": 70}'
    assert completions.last_payload is not None
    assert completions.last_payload["model"] == "gpt-4o"
    assert completions.last_payload["max_tokens"] == 500
    assert fake.closed is True


@pytest.mark.parametrize(
    ("content", "with_choice"), [(None, True), ("", True), ("ignored", False)]
)
def test_openai_chat_client_rejects_empty_reply(
    content: str | None, with_choice: bool
) -> None:
    client = OpenAIChatClient(client=_FakeOpenAI(_FakeCompletions(content, with_choice)))

    with pytest.raises(RuntimeError):
        asyncio.run(client.complete(model="gpt-4o", messages=[], max_tokens=10))


def test_openai_chat_client_create() -> None:
    client = OpenAIChatClient.create("openai-key")

    assert client.client.api_key == "openai-key"
    asyncio.run(client.close())
