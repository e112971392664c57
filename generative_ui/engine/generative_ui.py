"""Generative UI - Orchestrates design analysis and UI generation"""
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, Optional
import logging
import time

from generative_ui.config import default_models_config
from generative_ui.engine.design_analysis import DesignAnalysisEngine
from generative_ui.engine.errors import DESIGN_ANALYSIS_STAGE, UI_GENERATION_STAGE
from generative_ui.engine.generate_layout import GenUIEngine
from generative_ui.engine.models import (
    ChainResult,
    DesignAnalysisInput,
    ExecutionContext,
    ExecutionPhase,
    GenerateUIParams,
    GenerateUIResult,
    GenUIInput,
    ModelsConfig,
)
from generative_ui.services.llm_provider import create_model
from generative_ui.streaming.events import ProgressCallback

logger = logging.getLogger(__name__)

ChainState = Dict[str, Any]
ChainStep = Callable[[ChainState, Optional[ProgressCallback]], Awaitable[ChainState]]


class GenerativeUI:
    """
    Generative UI: runs the two pipeline stages and tracks execution state.

    Two-Model Strategy:
    - Design model: analyzes content and design brief into a specification
    - UI model: turns content + specification into a themed UI tree (JSON)

    Execution Phases:
    1. design-analysis: DesignAnalysisEngine produces the design text
    2. gen-ui: GenUIEngine produces the UI tree from content + design text
    3. completed

    Each run resets the execution context. Within a run the phase only moves
    forward and intermediate results only accumulate. An instance holds the
    state of one run at a time, so concurrent runs need separate instances.
    """

    def __init__(self):
        self.design_analysis_engine: Optional[DesignAnalysisEngine] = None
        self.gen_ui_engine: Optional[GenUIEngine] = None
        self.execution_context = ExecutionContext()

    async def generate_ui(
        self,
        params: GenerateUIParams,
        progress: Optional[ProgressCallback] = None
    ) -> GenerateUIResult:
        """
        Run both stages as explicit sequential steps.

        Never raises: any failure is returned as a result with success=False.
        Intermediate results stored before the failure remain available from
        get_intermediate_results().
        """
        start_time = time.perf_counter()

        try:
            self._start_run(params.models_config)
            state = self._initial_state(params)

            state = await self._design_analysis_step(state, progress)
            state = await self._gen_ui_step(state, progress)
            state = await self._complete_step(state, progress)

            return self._success(state, start_time)
        except Exception as e:
            return await self._failure(e, start_time, progress)

    async def generate_ui_with_sequential_chain(
        self,
        params: GenerateUIParams,
        progress: Optional[ProgressCallback] = None
    ) -> GenerateUIResult:
        """
        Run both stages as one composed chain.

        The chain is folded from the same steps as generate_ui(), so phase
        and intermediate results are recorded the same way.
        """
        start_time = time.perf_counter()

        try:
            self._start_run(params.models_config)
            chain = compose_chain(
                self._design_analysis_step,
                self._gen_ui_step,
                self._complete_step,
            )
            state = await chain(self._initial_state(params), progress)

            return self._success(state, start_time)
        except Exception as e:
            return await self._failure(e, start_time, progress)

    async def generate_ui_stream(
        self,
        params: GenerateUIParams,
        progress: Optional[ProgressCallback] = None
    ) -> AsyncIterator[str]:
        """
        Run design analysis, then return the UI model's raw chunk stream.

        Errors are not caught here; configuration and stage errors reach the
        caller. The gen-ui result is never stored and the run never reaches
        the completed phase, since parsing belongs to the caller. Close the
        returned generator with aclose() to abandon the stream early.
        """
        self._start_run(params.models_config)
        state = await self._design_analysis_step(self._initial_state(params), progress)

        await self._enter_phase(ExecutionPhase.GEN_UI, progress)
        if progress:
            await progress.agent_start(UI_GENERATION_STAGE, "Streaming UI structure...")

        return await self.gen_ui_engine.generate_ui_stream(
            GenUIInput(content=state["content"], design=state["design_analysis"].design)
        )

    def get_execution_context(self) -> ExecutionContext:
        return self.execution_context.model_copy(deep=True)

    def get_intermediate_results(self) -> ChainResult:
        return self.execution_context.intermediate_results.model_copy(deep=True)

    # ----- chain steps -----

    async def _design_analysis_step(
        self,
        state: ChainState,
        progress: Optional[ProgressCallback] = None
    ) -> ChainState:
        await self._enter_phase(ExecutionPhase.DESIGN_ANALYSIS, progress)
        if progress:
            await progress.agent_start(DESIGN_ANALYSIS_STAGE, "Analyzing content and design brief...")

        output = await self.design_analysis_engine.analyze_design(
            DesignAnalysisInput(content=state["content"], design_context=state.get("design_context"))
        )
        self.execution_context.intermediate_results.design_analysis = output
        logger.info(f"Design analysis complete ({len(output.design)} chars)")

        if progress:
            await progress.agent_complete(DESIGN_ANALYSIS_STAGE, success=True)
        return {**state, "design_analysis": output}

    async def _gen_ui_step(
        self,
        state: ChainState,
        progress: Optional[ProgressCallback] = None
    ) -> ChainState:
        await self._enter_phase(ExecutionPhase.GEN_UI, progress)
        if progress:
            await progress.agent_start(UI_GENERATION_STAGE, "Generating UI structure...")

        output = await self.gen_ui_engine.generate_ui(
            GenUIInput(content=state["content"], design=state["design_analysis"].design)
        )
        self.execution_context.intermediate_results.gen_ui = output
        logger.info("UI generation complete")

        if progress:
            await progress.agent_complete(UI_GENERATION_STAGE, success=True)
        return {**state, "gen_ui": output}

    async def _complete_step(
        self,
        state: ChainState,
        progress: Optional[ProgressCallback] = None
    ) -> ChainState:
        await self._enter_phase(ExecutionPhase.COMPLETED, progress)
        return state

    # ----- helpers -----

    def _start_run(self, models_config: Optional[ModelsConfig]):
        """Reset the execution context and build both engines"""
        self.execution_context = ExecutionContext()
        self._initialize_engines(models_config)

    def _initialize_engines(self, models_config: Optional[ModelsConfig]):
        configs = (models_config or ModelsConfig()).merged_over(default_models_config())

        design_model = create_model(configs.design_model)
        self.design_analysis_engine = DesignAnalysisEngine(design_model)

        ui_model = create_model(configs.ui_model)
        self.gen_ui_engine = GenUIEngine(ui_model)

        logger.info(f"Engines initialized: design={design_model.model}, ui={ui_model.model}")

    async def _enter_phase(self, phase: ExecutionPhase, progress: Optional[ProgressCallback]):
        self.execution_context.advance(phase)
        if progress:
            await progress.phase(phase.value)

    @staticmethod
    def _initial_state(params: GenerateUIParams) -> ChainState:
        return {"content": params.content, "design_context": params.design}

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return max((time.perf_counter() - start_time) * 1000, 0.0)

    def _success(self, state: ChainState, start_time: float) -> GenerateUIResult:
        execution_time = self._elapsed_ms(start_time)
        logger.info(f"Generation completed in {execution_time:.0f}ms")
        return GenerateUIResult(success=True, data=state["gen_ui"], execution_time=execution_time)

    async def _failure(
        self,
        error: Exception,
        start_time: float,
        progress: Optional[ProgressCallback]
    ) -> GenerateUIResult:
        execution_time = self._elapsed_ms(start_time)
        message = str(error) or "Unknown error occurred"
        logger.error(
            f"Generation failed in phase {self.execution_context.current_phase.value} "
            f"after {execution_time:.0f}ms: {message}"
        )
        if progress:
            agent = getattr(error, "stage", self.execution_context.current_phase.value)
            await progress.agent_complete(agent, success=False, message=message)
        return GenerateUIResult(success=False, error=message, execution_time=execution_time)


def compose_chain(*steps: ChainStep) -> ChainStep:
    """Fold steps into one chain; each step receives the previous step's state"""
    async def chain(state: ChainState, progress: Optional[ProgressCallback] = None) -> ChainState:
        for step in steps:
            state = await step(state, progress)
        return state

    return chain
