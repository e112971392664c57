"""Pytest fixtures shared across the test suite."""
import sys
from pathlib import Path
from typing import Callable, List, Optional
from unittest.mock import patch

import pytest

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from generative_ui.engine.models import ModelConfig
from generative_ui.services.llm_provider import ModelClient


class FakeModelClient(ModelClient):
    """
    In-memory model client.

    Records every prompt, counts invocations and can run a hook on each
    call so tests can observe orchestrator state mid-run.
    """

    def __init__(
        self,
        response: str = "",
        chunks: Optional[List[str]] = None,
        error: Optional[Exception] = None,
        model: str = "fake-model",
        on_invoke: Optional[Callable[[str], None]] = None,
    ):
        super().__init__(model, "test-key")
        self.response = response
        self.chunks = chunks or []
        self.error = error
        self.on_invoke = on_invoke
        self.prompts: List[str] = []
        self.json_flags: List[bool] = []
        self.invoke_count = 0
        self.stream_count = 0

    @property
    def name(self) -> str:
        return "Fake"

    async def invoke(self, prompt: str, json_output: bool = False) -> str:
        self.invoke_count += 1
        self.prompts.append(prompt)
        self.json_flags.append(json_output)
        if self.on_invoke:
            self.on_invoke(prompt)
        if self.error:
            raise self.error
        return self.response

    async def stream(self, prompt: str):
        self.stream_count += 1
        self.prompts.append(prompt)
        for chunk in self.chunks:
            yield chunk
        if self.error:
            raise self.error


SAMPLE_UI = {
    "theme": {
        "colors": {
            "primary": "#1E40AF",
            "secondary": "#64748B",
            "background": "#FFFFFF",
            "text": "#0F172A",
        }
    },
    "root": {
        "id": "root",
        "type": "LinearLayout",
        "props": {"direction": "vertical"},
        "children": [
            {"id": "title", "type": "Text", "props": {"variant": "h1"}, "content": "Welcome to X"}
        ],
    },
}


@pytest.fixture
def design_client():
    return FakeModelClient(response="  Blue palette, hero section, single CTA.  \n", model="gemini-2.5-flash")


@pytest.fixture
def ui_client():
    import json
    return FakeModelClient(response=json.dumps(SAMPLE_UI), model="claude-sonnet-4-20250514")


@pytest.fixture
def models_config():
    """Valid caller configuration for both stages"""
    from generative_ui.engine.models import ModelsConfig
    return ModelsConfig(
        design_model=ModelConfig(api_key="google-key", model="gemini-2.5-flash"),
        ui_model=ModelConfig(api_key="anthropic-key", model="claude-sonnet-4-20250514"),
    )


@pytest.fixture
def patch_create_model(design_client, ui_client):
    """
    Replace create_model in the orchestrator so the design config gets
    design_client and the UI config gets ui_client.

    Yields the list of ModelConfig objects create_model was called with.
    """
    calls: List[ModelConfig] = []

    def fake_create_model(config: ModelConfig):
        calls.append(config)
        return design_client if len(calls) % 2 == 1 else ui_client

    with patch("generative_ui.engine.generative_ui.create_model", side_effect=fake_create_model):
        yield calls
