from types import SimpleNamespace

import httpx
import pytest
from openai import APITimeoutError

from app.services.generation import FlightTextGenerator, extract_json_object
from app.services.openai_client import OpenAITextClient


class StubCompletionClient:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.prompts = []

    async def complete(self, prompt, *, system_message=None):
        self.prompts.append((prompt, system_message))
        if self.error:
            raise self.error
        return self.text


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _fake_openai(completions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


def test_extract_json_object_ignores_surrounding_prose():
    text = 'Here you go:\n```json\n{"status": "In flight", "currentLocation": {"city": "Tokyo"}}\n```\nThanks!'

    assert extract_json_object(text) == {"status": "In flight", "currentLocation": {"city": "Tokyo"}}


@pytest.mark.parametrize("text", ["", "no json here", "{not json}", "} backwards {", "[1, 2]"])
def test_extract_json_object_rejects_unparseable_text(text):
    assert extract_json_object(text) is None


@pytest.mark.anyio
async def test_generator_returns_parsed_candidate():
    client = StubCompletionClient('{"status": "In flight", "currentLocation": {"city": "Osaka"}}')
    generator = FlightTextGenerator(client)

    candidate = await generator.generate("prompt")

    assert candidate["currentLocation"]["city"] == "Osaka"
    assert client.prompts[0][1] == generator.system_message


@pytest.mark.anyio
async def test_generator_rejects_candidate_missing_status():
    generator = FlightTextGenerator(StubCompletionClient('{"currentLocation": {"city": "Osaka"}}'))

    assert await generator.generate("prompt") is None


@pytest.mark.anyio
async def test_generator_swallows_client_failures():
    generator = FlightTextGenerator(StubCompletionClient(error=RuntimeError("AI service unavailable")))

    assert await generator.generate("prompt") is None


@pytest.mark.anyio
async def test_openai_client_sends_prompt_and_returns_text():
    completions = FakeCompletions(content='{"status": "ok"}')
    client = OpenAITextClient(
        api_key="sk-test", model="gpt-4o-mini", timeout=5.0, client=_fake_openai(completions)
    )

    text = await client.complete("Where is JL123?", system_message="Be brief.")

    assert text == '{"status": "ok"}'
    call = completions.calls[0]
    assert call["model"] == "gpt-4o-mini"
    assert call["messages"] == [
        {"role": "system", "content": "Be brief."},
        {"role": "user", "content": "Where is JL123?"},
    ]


@pytest.mark.anyio
async def test_openai_client_maps_sdk_errors_to_runtime_error():
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    completions = FakeCompletions(error=APITimeoutError(request=request))
    client = OpenAITextClient(
        api_key="sk-test", model="gpt-4o-mini", timeout=5.0, client=_fake_openai(completions)
    )

    with pytest.raises(RuntimeError, match="temporarily unavailable"):
        await client.complete("Where is JL123?")


def test_openai_client_requires_api_key():
    with pytest.raises(RuntimeError):
        OpenAITextClient(api_key="", model="gpt-4o-mini", timeout=5.0)
