import pytest

from novasearch.application.errors.exceptions import ConfigurationError, UpstreamError
from novasearch.domain.models.app_config import LLMConfig
from novasearch.infrastructure.external.llm import OpenAILLM

pytestmark = pytest.mark.anyio


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class _FakeChoice:
    def __init__(self, message=None, text=None):
        self.message = message
        self.text = text


class _FakeResponse:
    def __init__(self, choice):
        self.choices = [choice]


class _FakeCompletions:
    def __init__(self, response=None, error: Exception | None = None):
        self._response = response
        self._error = error
        self.kwargs: dict = {}

    async def create(self, **kwargs):
        self.kwargs = kwargs
        if self._error is not None:
            raise self._error
        return self._response


class _FakeClient:
    def __init__(self, completions: _FakeCompletions):
        self.chat = type("Chat", (), {"completions": completions})()


def _llm(api_key: str = "test-key") -> OpenAILLM:
    return OpenAILLM(
        LLMConfig(
            base_url="https://openrouter.ai/api/v1",
            api_key=api_key,
            model_name="test-model",
            timeout_seconds=3,
        )
    )


async def test_invoke_returns_normalized_message_and_passes_params() -> None:
    llm = _llm()
    completions = _FakeCompletions(
        _FakeResponse(_FakeChoice(message={"role": "assistant", "content": '{"intent": "news"}'}))
    )
    llm._client = _FakeClient(completions)  # type: ignore[attr-defined]

    result = await llm.invoke(
        messages=[{"role": "user", "content": "hi"}],
        response_format={"type": "json_object"},
    )

    assert result == {"role": "assistant", "content": '{"intent": "news"}'}
    assert completions.kwargs["model"] == "test-model"
    assert completions.kwargs["response_format"] == {"type": "json_object"}
    assert completions.kwargs["timeout"] == 3


async def test_invoke_accepts_plain_string_and_text_choices() -> None:
    llm = _llm()
    llm._client = _FakeClient(_FakeCompletions(_FakeResponse(_FakeChoice(message="plain"))))  # type: ignore[attr-defined]
    assert await llm.invoke(messages=[]) == {"role": "assistant", "content": "plain"}

    llm._client = _FakeClient(_FakeCompletions(_FakeResponse(_FakeChoice(text="legacy"))))  # type: ignore[attr-defined]
    assert await llm.invoke(messages=[]) == {"role": "assistant", "content": "legacy"}


async def test_invoke_flattens_content_parts() -> None:
    llm = _llm()
    message = {"role": "assistant", "content": [{"type": "text", "text": "a"}, {"text": "b"}]}
    llm._client = _FakeClient(_FakeCompletions(_FakeResponse(_FakeChoice(message=message))))  # type: ignore[attr-defined]

    assert (await llm.invoke(messages=[]))["content"] == "ab"


async def test_invoke_wraps_sdk_errors() -> None:
    llm = _llm()
    llm._client = _FakeClient(_FakeCompletions(error=RuntimeError("rate limited")))  # type: ignore[attr-defined]

    with pytest.raises(UpstreamError):
        await llm.invoke(messages=[])


async def test_invoke_without_key_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        await _llm(api_key="").invoke(messages=[])
