"""
Model client abstraction over the supported LLM providers.

Supports:
- Google (Gemini): gemini-2.5-flash, gemini-2.5-pro
- Anthropic (Claude): claude-opus-4, claude-sonnet-4, claude-3-x
- OpenAI (GPT): gpt-4o, gpt-4o-mini

Usage:
    from generative_ui.services.llm_provider import create_model

    client = create_model(ModelConfig(api_key="...", model="gemini-2.5-flash"))
    text = await client.invoke("Describe a landing page")

    async for chunk in client.stream("Describe a landing page"):
        print(chunk, end="")
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import AsyncIterator, Dict, List, Optional
import logging

import anthropic
import openai
from google import genai
from google.genai import types

from generative_ui.config import settings
from generative_ui.engine.errors import MissingCredentialError, UnsupportedModelError
from generative_ui.engine.models import ModelConfig

logger = logging.getLogger(__name__)


class ModelProvider(str, Enum):
    GOOGLE = "google"
    ANTHROPIC = "anthropic"
    OPENAI = "openai"


SUPPORTED_MODELS: Dict[ModelProvider, List[str]] = {
    ModelProvider.GOOGLE: ["gemini-2.5-flash", "gemini-2.5-pro"],
    ModelProvider.ANTHROPIC: [
        "claude-opus-4-20250514",
        "claude-sonnet-4-20250514",
        "claude-3-7-sonnet-latest",
        "claude-3-5-haiku-latest",
        "claude-3-5-sonnet-latest",
    ],
    ModelProvider.OPENAI: ["gpt-4o", "gpt-4o-mini"],
}


def list_supported_models() -> List[str]:
    """All supported model ids, in provider order"""
    return [model for models in SUPPORTED_MODELS.values() for model in models]


def get_model_provider(model: str) -> Optional[ModelProvider]:
    """Return the provider whose allow-list contains model, or None"""
    for provider, models in SUPPORTED_MODELS.items():
        if model in models:
            return provider
    return None


def is_model_supported(model: str) -> bool:
    return get_model_provider(model) is not None


class ModelClient(ABC):
    """
    Single-shot and streaming text completion against one model.

    Clients hold no per-request state once constructed.
    """

    def __init__(
        self,
        model: str,
        api_key: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ):
        self.model = model
        self.temperature = settings.MODEL_TEMPERATURE if temperature is None else temperature
        self.max_tokens = max_tokens or settings.MAX_TOKENS

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging"""
        pass

    @abstractmethod
    async def invoke(self, prompt: str, json_output: bool = False) -> str:
        """
        Send prompt and return the complete response text.

        Args:
            prompt: Rendered prompt text
            json_output: Ask the provider for a JSON response where supported

        Returns:
            Response text
        """
        pass

    @abstractmethod
    def stream(self, prompt: str) -> AsyncIterator[str]:
        """
        Send prompt and yield response text chunks as they arrive.

        The returned async generator is lazy, finite and can be closed
        early with aclose().
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model!r})"


class GoogleModelClient(ModelClient):
    """Google Gemini client"""

    def __init__(self, model: str, api_key: str, **kwargs):
        super().__init__(model, api_key, **kwargs)
        self.client = genai.Client(api_key=api_key)

    @property
    def name(self) -> str:
        return "Google"

    def _config(self, json_output: bool = False) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            temperature=self.temperature,
            max_output_tokens=self.max_tokens,
            response_mime_type="application/json" if json_output else None,
        )

    async def invoke(self, prompt: str, json_output: bool = False) -> str:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=self._config(json_output),
        )
        return response.text or ""

    async def stream(self, prompt: str) -> AsyncIterator[str]:
        chunks = await self.client.aio.models.generate_content_stream(
            model=self.model,
            contents=prompt,
            config=self._config(),
        )
        async for chunk in chunks:
            if chunk.text:
                yield chunk.text


class AnthropicModelClient(ModelClient):
    """Anthropic Claude client"""

    def __init__(self, model: str, api_key: str, **kwargs):
        super().__init__(model, api_key, **kwargs)
        self.client = anthropic.AsyncAnthropic(api_key=api_key)

    @property
    def name(self) -> str:
        return "Anthropic"

    async def invoke(self, prompt: str, json_output: bool = False) -> str:
        # Claude has no JSON response mode; the prompt carries the instruction
        response = await self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            messages=[{"role": "user", "content": prompt}]
        )
        return "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )

    async def stream(self, prompt: str) -> AsyncIterator[str]:
        async with self.client.messages.stream(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            messages=[{"role": "user", "content": prompt}]
        ) as stream:
            async for text in stream.text_stream:
                yield text


class OpenAIModelClient(ModelClient):
    """OpenAI GPT client"""

    def __init__(self, model: str, api_key: str, **kwargs):
        super().__init__(model, api_key, **kwargs)
        self.client = openai.AsyncOpenAI(api_key=api_key)

    @property
    def name(self) -> str:
        return "OpenAI"

    async def invoke(self, prompt: str, json_output: bool = False) -> str:
        extra = {"response_format": {"type": "json_object"}} if json_output else {}
        response = await self.client.chat.completions.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            messages=[{"role": "user", "content": prompt}],
            **extra
        )
        return response.choices[0].message.content or ""

    async def stream(self, prompt: str) -> AsyncIterator[str]:
        response = await self.client.chat.completions.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            messages=[{"role": "user", "content": prompt}],
            stream=True
        )
        async for chunk in response:
            if chunk.choices and chunk.choices[0].delta.content:
                yield chunk.choices[0].delta.content


_CLIENTS = {
    ModelProvider.GOOGLE: GoogleModelClient,
    ModelProvider.ANTHROPIC: AnthropicModelClient,
    ModelProvider.OPENAI: OpenAIModelClient,
}


def create_model(model_config: ModelConfig) -> ModelClient:
    """
    Build the model client for a configuration.

    Validation is local only; no network call is made here.

    Raises:
        MissingCredentialError: api_key is empty
        UnsupportedModelError: model is not in any provider's allow-list
    """
    if not model_config.api_key:
        raise MissingCredentialError(model_config.model)

    provider = get_model_provider(model_config.model)
    if provider is None:
        raise UnsupportedModelError(model_config.model, list_supported_models())

    client = _CLIENTS[provider](model_config.model, model_config.api_key)
    logger.debug(f"Created {client.name} client for model {model_config.model}")
    return client
