"""Tests for the model factory and provider clients."""
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from generative_ui.engine.errors import (
    ConfigurationError,
    MissingCredentialError,
    UnsupportedModelError,
)
from generative_ui.engine.models import ModelConfig
from generative_ui.services import llm_provider
from generative_ui.services.llm_provider import (
    AnthropicModelClient,
    GoogleModelClient,
    ModelProvider,
    OpenAIModelClient,
    create_model,
    get_model_provider,
    is_model_supported,
    list_supported_models,
)


async def _collect(chunks):
    return [chunk async for chunk in chunks]


async def _async_iter(items):
    for item in items:
        yield item


class TestModelLookup:
    def test_provider_for_each_allow_list(self):
        assert get_model_provider("gemini-2.5-pro") == ModelProvider.GOOGLE
        assert get_model_provider("claude-3-5-haiku-latest") == ModelProvider.ANTHROPIC
        assert get_model_provider("gpt-4o-mini") == ModelProvider.OPENAI

    def test_unknown_model(self):
        assert get_model_provider("llama-3") is None
        assert not is_model_supported("llama-3")
        assert is_model_supported("gemini-2.5-flash")

    def test_list_supported_models_is_union(self):
        models = list_supported_models()
        assert "gemini-2.5-flash" in models
        assert "claude-opus-4-20250514" in models
        assert "gpt-4o" in models
        assert len(models) == len(set(models))


class TestCreateModel:
    def test_missing_credential(self):
        with pytest.raises(MissingCredentialError):
            create_model(ModelConfig(api_key="", model="gemini-2.5-flash"))

    def test_unsupported_model(self):
        with pytest.raises(UnsupportedModelError) as exc_info:
            create_model(ModelConfig(api_key="key", model="claude-3-5-sonnet-20241022"))

        assert exc_info.value.model == "claude-3-5-sonnet-20241022"
        assert "Supported models:" in str(exc_info.value)
        assert isinstance(exc_info.value, ConfigurationError)

    def test_credential_checked_before_model(self):
        with pytest.raises(MissingCredentialError):
            create_model(ModelConfig(api_key="", model="not-a-model"))

    @patch("generative_ui.services.llm_provider.genai")
    def test_google_client_selected(self, mock_genai):
        client = create_model(ModelConfig(api_key="g-key", model="gemini-2.5-flash"))

        assert isinstance(client, GoogleModelClient)
        assert client.name == "Google"
        assert client.model == "gemini-2.5-flash"
        mock_genai.Client.assert_called_once_with(api_key="g-key")

    @patch("generative_ui.services.llm_provider.anthropic")
    def test_anthropic_client_selected(self, mock_anthropic):
        client = create_model(ModelConfig(api_key="a-key", model="claude-sonnet-4-20250514"))

        assert isinstance(client, AnthropicModelClient)
        mock_anthropic.AsyncAnthropic.assert_called_once_with(api_key="a-key")

    @patch("generative_ui.services.llm_provider.openai")
    def test_openai_client_selected(self, mock_openai):
        client = create_model(ModelConfig(api_key="o-key", model="gpt-4o"))

        assert isinstance(client, OpenAIModelClient)
        mock_openai.AsyncOpenAI.assert_called_once_with(api_key="o-key")

    def test_construction_makes_no_calls(self):
        factory = MagicMock()
        with patch.dict(llm_provider._CLIENTS, {ModelProvider.GOOGLE: factory}):
            create_model(ModelConfig(api_key="g-key", model="gemini-2.5-pro"))

        factory.assert_called_once_with("gemini-2.5-pro", "g-key")
        factory.return_value.invoke.assert_not_called()
        factory.return_value.stream.assert_not_called()


class TestGoogleModelClient:
    @pytest.fixture
    def client(self):
        with patch("generative_ui.services.llm_provider.genai") as mock_genai:
            client = GoogleModelClient("gemini-2.5-flash", "g-key")
            client.client = mock_genai.Client.return_value
            yield client

    @pytest.mark.asyncio
    async def test_invoke(self, client):
        client.client.aio.models.generate_content = AsyncMock(return_value=SimpleNamespace(text="design"))

        result = await client.invoke("prompt")

        assert result == "design"
        kwargs = client.client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert kwargs["contents"] == "prompt"
        assert kwargs["config"].response_mime_type is None

    @pytest.mark.asyncio
    async def test_invoke_json_output(self, client):
        client.client.aio.models.generate_content = AsyncMock(return_value=SimpleNamespace(text="{}"))

        await client.invoke("prompt", json_output=True)

        kwargs = client.client.aio.models.generate_content.call_args.kwargs
        assert kwargs["config"].response_mime_type == "application/json"

    @pytest.mark.asyncio
    async def test_stream_skips_empty_chunks(self, client):
        chunks = [SimpleNamespace(text="{"), SimpleNamespace(text=None), SimpleNamespace(text="}")]
        client.client.aio.models.generate_content_stream = AsyncMock(return_value=_async_iter(chunks))

        assert await _collect(client.stream("prompt")) == ["{", "}"]


class TestAnthropicModelClient:
    @pytest.fixture
    def client(self):
        with patch("generative_ui.services.llm_provider.anthropic") as mock_anthropic:
            client = AnthropicModelClient("claude-sonnet-4-20250514", "a-key")
            client.client = mock_anthropic.AsyncAnthropic.return_value
            yield client

    @pytest.mark.asyncio
    async def test_invoke_joins_text_blocks(self, client):
        response = SimpleNamespace(content=[
            SimpleNamespace(type="text", text='{"a": '),
            SimpleNamespace(type="text", text="1}"),
        ])
        client.client.messages.create = AsyncMock(return_value=response)

        result = await client.invoke("prompt", json_output=True)

        assert result == '{"a": 1}'
        kwargs = client.client.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-sonnet-4-20250514"
        assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]
        assert kwargs["temperature"] == pytest.approx(0.1)

    @pytest.mark.asyncio
    async def test_stream(self, client):
        stream = MagicMock()
        stream.text_stream = _async_iter(["Hello", " world"])
        manager = MagicMock()
        manager.__aenter__ = AsyncMock(return_value=stream)
        manager.__aexit__ = AsyncMock(return_value=False)
        client.client.messages.stream = MagicMock(return_value=manager)

        assert await _collect(client.stream("prompt")) == ["Hello", " world"]
        manager.__aexit__.assert_awaited_once()


class TestOpenAIModelClient:
    @pytest.fixture
    def client(self):
        with patch("generative_ui.services.llm_provider.openai") as mock_openai:
            client = OpenAIModelClient("gpt-4o-mini", "o-key")
            client.client = mock_openai.AsyncOpenAI.return_value
            yield client

    @pytest.mark.asyncio
    async def test_invoke_json_output(self, client):
        response = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content="{}"))])
        client.client.chat.completions.create = AsyncMock(return_value=response)

        assert await client.invoke("prompt", json_output=True) == "{}"
        kwargs = client.client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}

    @pytest.mark.asyncio
    async def test_invoke_plain_text(self, client):
        response = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content="text"))])
        client.client.chat.completions.create = AsyncMock(return_value=response)

        assert await client.invoke("prompt") == "text"
        assert "response_format" not in client.client.chat.completions.create.call_args.kwargs

    @pytest.mark.asyncio
    async def test_stream(self, client):
        def chunk(text):
            return SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=text))])

        client.client.chat.completions.create = AsyncMock(
            return_value=_async_iter([chunk("a"), chunk(None), chunk("b")])
        )

        assert await _collect(client.stream("prompt")) == ["a", "b"]
        assert client.client.chat.completions.create.call_args.kwargs["stream"] is True
