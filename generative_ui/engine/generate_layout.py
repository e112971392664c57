"""UI Generation Engine - Phase 2: content + design specification -> UI tree JSON"""
from typing import Any, AsyncIterator
import json
import logging

from generative_ui.engine.errors import (
    UI_GENERATION_STAGE,
    MalformedOutputError,
    StageExecutionError,
)
from generative_ui.engine.models import GenUIInput
from generative_ui.prompts import GEN_UI_PROMPT, render_prompt
from generative_ui.services.llm_provider import ModelClient
from generative_ui.utils.json_output import parse_json_output

logger = logging.getLogger(__name__)


class GenUIEngine:
    """
    Phase 2: Generates the themed UI tree.

    The parsed JSON is returned without validation, so output that does not
    match the documented shape still passes through.
    """

    def __init__(self, model: ModelClient):
        self.model = model

    def _render(self, input: GenUIInput) -> str:
        return render_prompt(GEN_UI_PROMPT, content=input.content, design=input.design)

    async def generate_ui(self, input: GenUIInput) -> Any:
        """Generate and parse the UI tree"""
        try:
            prompt = self._render(input)
            logger.info(f"Running UI generation with {self.model.model}")
            raw = await self.model.invoke(prompt, json_output=True)
        except Exception as e:
            logger.error(f"UI generation error: {e}")
            raise StageExecutionError(UI_GENERATION_STAGE, str(e) or type(e).__name__, e) from e

        try:
            return parse_json_output(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse UI generation output as JSON: {e}")
            raise MalformedOutputError(raw, e) from e

    async def generate_ui_stream(self, input: GenUIInput) -> AsyncIterator[str]:
        """Return raw chunks; the caller accumulates and parses them"""
        return self.model.stream(self._render(input))
