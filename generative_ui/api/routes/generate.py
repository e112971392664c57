"""Generation API routes with SSE streaming"""
from fastapi import APIRouter, HTTPException
from sse_starlette.sse import EventSourceResponse, ServerSentEvent
import asyncio
import contextlib
import json
import logging
from typing import AsyncGenerator, AsyncIterator

from generative_ui.api.models import AnalyzeRequest, GenerateRequest, GenerateResponse
from generative_ui.config import default_models_config
from generative_ui.engine.design_analysis import DesignAnalysisEngine
from generative_ui.engine.errors import (
    UI_GENERATION_STAGE,
    ConfigurationError,
    StageExecutionError,
)
from generative_ui.engine.generative_ui import GenerativeUI
from generative_ui.engine.models import (
    DesignAnalysisInput,
    DesignAnalysisOutput,
    GenerateUIResult,
    ModelsConfig,
)
from generative_ui.services.llm_provider import create_model
from generative_ui.streaming.events import TERMINAL_EVENTS, EventType, ProgressCallback

logger = logging.getLogger(__name__)

router = APIRouter()

# Seconds without events before a keepalive comment is sent
STREAM_IDLE_TIMEOUT = 120.0


async def run_generation(
    generative_ui: GenerativeUI,
    request: GenerateRequest,
    progress: ProgressCallback = None
) -> GenerateUIResult:
    """Run the pipeline the way the request asks for"""
    params = request.to_params()
    if request.useSequentialChain:
        return await generative_ui.generate_ui_with_sequential_chain(params, progress)
    return await generative_ui.generate_ui(params, progress)


def build_response(generative_ui: GenerativeUI, result: GenerateUIResult) -> GenerateResponse:
    return GenerateResponse(
        result=result,
        context=generative_ui.get_execution_context(),
        intermediateResults=generative_ui.get_intermediate_results()
    )


def to_server_sent_event(event) -> ServerSentEvent:
    if event.event == EventType.KEEPALIVE:
        return ServerSentEvent(comment=f"keepalive {event.message}")
    return ServerSentEvent(event=event.event.value, data=json.dumps(event.payload()))


@router.post("/generate", response_model=GenerateResponse)
async def generate(request: GenerateRequest):
    """
    Generate a UI from content in one request.

    Failures inside the pipeline do not raise: the response carries
    `result.success = false` with the error message and elapsed time,
    plus whatever intermediate results were produced before the failure.

    **Example:**
    ```
    POST /api/genui/generate
    Content-Type: application/json

    {
      "content": "Welcome to TaskFlow Pro ...",
      "design": "Modern, professional, blues and whites",
      "modelsConfig": {
        "designModel": {"model": "gemini-2.5-flash"},
        "uiModel": {"model": "claude-sonnet-4-20250514"}
      }
    }
    ```
    """
    generative_ui = GenerativeUI()
    result = await run_generation(generative_ui, request)

    if not result.success:
        logger.warning(f"Generation failed: {result.error}")

    return build_response(generative_ui, result)


async def stream_generation(request: GenerateRequest) -> AsyncGenerator[ServerSentEvent, None]:
    """Generate SSE events for pipeline progress"""
    generative_ui = GenerativeUI()
    progress = ProgressCallback()

    async def run():
        """Run generation in background"""
        try:
            result = await run_generation(generative_ui, request, progress)
            response = build_response(generative_ui, result)
            if result.success:
                await progress.complete(response.model_dump(mode="json", by_alias=True))
            else:
                await progress.error(result.error or "Generation failed")
        except Exception as e:
            logger.error(f"Generation stream error: {e}", exc_info=True)
            await progress.error(str(e))

    task = asyncio.create_task(run())

    try:
        while True:
            try:
                event = await asyncio.wait_for(progress.queue.get(), timeout=STREAM_IDLE_TIMEOUT)
            except asyncio.TimeoutError:
                logger.debug("Sending keepalive ping")
                await progress.keepalive("ping")
                continue

            logger.debug(f"Sending SSE event: {event.event.value} - {event.message[:50]}")
            yield to_server_sent_event(event)

            if event.event in TERMINAL_EVENTS:
                logger.info(f"Stream ending with: {event.event.value}")
                break
    finally:
        progress.close()
        if not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task


@router.post("/generate/stream")
async def generate_streaming(request: GenerateRequest):
    """
    Generate a UI with SSE progress updates.

    **Event Types:**
    - `phase`: Phase transitions (design-analysis, gen-ui, completed)
    - `agent_start`: A stage started
    - `agent_complete`: A stage finished (`data.success`)
    - `complete`: Final response (result, context, intermediateResults)
    - `error`: Generation failed
    """
    return EventSourceResponse(stream_generation(request))


async def stream_chunks(chunks: AsyncIterator[str]) -> AsyncGenerator[ServerSentEvent, None]:
    """Relay raw UI chunks as SSE events"""
    try:
        async for chunk in chunks:
            yield ServerSentEvent(
                event=EventType.CHUNK.value,
                data=json.dumps({"agent": UI_GENERATION_STAGE, "message": chunk})
            )
        yield ServerSentEvent(
            event=EventType.COMPLETE.value,
            data=json.dumps({"agent": UI_GENERATION_STAGE, "message": "Stream complete"})
        )
    except Exception as e:
        logger.error(f"UI stream error: {e}", exc_info=True)
        yield ServerSentEvent(
            event=EventType.ERROR.value,
            data=json.dumps({"agent": UI_GENERATION_STAGE, "message": str(e)})
        )
    finally:
        await chunks.aclose()


@router.post("/generate/raw")
async def generate_raw(request: GenerateRequest):
    """
    Run design analysis, then stream the UI model's raw output.

    The JSON arrives in `chunk` events; the client accumulates and parses
    it. Configuration errors return 400 and design analysis failures 502
    before any event is sent.
    """
    generative_ui = GenerativeUI()
    try:
        chunks = await generative_ui.generate_ui_stream(request.to_params())
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StageExecutionError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return EventSourceResponse(stream_chunks(chunks))


@router.post("/analyze", response_model=DesignAnalysisOutput)
async def analyze(request: AnalyzeRequest):
    """Run the design analysis stage only and return the design specification"""
    configs = (request.modelsConfig or ModelsConfig()).merged_over(default_models_config())

    try:
        engine = DesignAnalysisEngine(create_model(configs.design_model))
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        return await engine.analyze_design(
            DesignAnalysisInput(content=request.content, design_context=request.design)
        )
    except StageExecutionError as e:
        raise HTTPException(status_code=502, detail=str(e))
