"""Design Analysis Engine - Phase 1: content + design brief -> design specification"""
from typing import AsyncIterator
import logging

from generative_ui.config import settings
from generative_ui.engine.errors import DESIGN_ANALYSIS_STAGE, StageExecutionError
from generative_ui.engine.models import DesignAnalysisInput, DesignAnalysisOutput
from generative_ui.prompts import DESIGN_ANALYSIS_PROMPT, render_prompt
from generative_ui.services.llm_provider import ModelClient

logger = logging.getLogger(__name__)


class DesignAnalysisEngine:
    """
    Phase 1: Analyzes content and the caller's design brief.

    Outputs a plain-text design specification (visual style, layout
    strategy, hierarchy, components) that guides UI generation.
    """

    def __init__(self, model: ModelClient):
        self.model = model

    def _render(self, input: DesignAnalysisInput) -> str:
        if not input.content or not input.content.strip():
            raise ValueError("content must not be empty")

        design_context = input.design_context
        if not design_context or not design_context.strip():
            design_context = settings.DEFAULT_DESIGN_CONTEXT

        return render_prompt(
            DESIGN_ANALYSIS_PROMPT,
            content=input.content,
            design_context=design_context,
        )

    async def analyze_design(self, input: DesignAnalysisInput) -> DesignAnalysisOutput:
        """Run design analysis to completion and return the trimmed specification"""
        try:
            prompt = self._render(input)
            logger.info(f"Running design analysis with {self.model.model}")
            result = await self.model.invoke(prompt)
            return DesignAnalysisOutput(design=result.strip())
        except Exception as e:
            logger.error(f"Design analysis error: {e}")
            raise StageExecutionError(DESIGN_ANALYSIS_STAGE, str(e) or type(e).__name__, e) from e

    async def analyze_design_stream(self, input: DesignAnalysisInput) -> AsyncIterator[str]:
        """Render the same prompt and return the model's chunk stream"""
        try:
            prompt = self._render(input)
        except ValueError as e:
            raise StageExecutionError(DESIGN_ANALYSIS_STAGE, str(e), e) from e
        return self.model.stream(prompt)
