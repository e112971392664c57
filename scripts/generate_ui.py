#!/usr/bin/env python
"""
Run the generative UI pipeline from the command line.

Shows:
1. Phase and stage progress while the pipeline runs
2. The generated UI tree (or the error and elapsed time)
3. The execution context and intermediate results

Usage:
    python scripts/generate_ui.py "Welcome to TaskFlow Pro ..." --design "Dark theme"
    python scripts/generate_ui.py "Analytics dashboard" --ui-model gemini-2.5-pro --stream
"""
import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from generative_ui import GenerativeUI, GenerateUIParams, ModelConfig, ModelsConfig
from generative_ui.streaming.events import ProgressCallback


def build_params(args) -> GenerateUIParams:
    models_config = ModelsConfig()
    if args.design_model:
        models_config.design_model = ModelConfig(model=args.design_model)
    if args.ui_model:
        models_config.ui_model = ModelConfig(model=args.ui_model)

    return GenerateUIParams(
        content=args.content,
        design=args.design,
        models_config=models_config
    )


async def print_progress(progress: ProgressCallback):
    async for event in progress.events():
        label = f"[{event.agent}] " if event.agent else ""
        print(f"  {event.event.value:<15} {label}{event.message}", file=sys.stderr)


async def run(args) -> int:
    generative_ui = GenerativeUI()
    params = build_params(args)

    if args.stream:
        print("📡 Streaming UI generation...", file=sys.stderr)
        chunks = await generative_ui.generate_ui_stream(params)
        try:
            async for chunk in chunks:
                print(chunk, end="", flush=True)
        finally:
            await chunks.aclose()
        print()
        return 0

    print("🚀 Starting UI generation...", file=sys.stderr)
    progress = ProgressCallback()
    printer = asyncio.create_task(print_progress(progress))

    if args.sequential:
        result = await generative_ui.generate_ui_with_sequential_chain(params, progress)
    else:
        result = await generative_ui.generate_ui(params, progress)

    if result.success:
        await progress.complete({"executionTime": result.execution_time})
    else:
        await progress.error(result.error or "Generation failed")
    await printer

    if result.success:
        print(f"✅ UI generated in {result.execution_time:.0f}ms", file=sys.stderr)
        print(json.dumps(result.data, indent=2))
    else:
        print(f"❌ Generation failed after {result.execution_time:.0f}ms: {result.error}", file=sys.stderr)

    if args.verbose:
        context = generative_ui.get_execution_context()
        print("📊 Execution context:", file=sys.stderr)
        print(context.model_dump_json(by_alias=True, indent=2), file=sys.stderr)

    return 0 if result.success else 1


def main():
    parser = argparse.ArgumentParser(description="Generate a themed UI tree from content")
    parser.add_argument("content", help="Content to build the UI for")
    parser.add_argument("--design", help="Design brief (optional)")
    parser.add_argument("--design-model", help="Model id for design analysis")
    parser.add_argument("--ui-model", help="Model id for UI generation")
    parser.add_argument("--stream", action="store_true", help="Stream raw UI model output")
    parser.add_argument("--sequential", action="store_true", help="Use the composed chain")
    parser.add_argument("--verbose", "-v", action="store_true", help="Print the execution context")
    args = parser.parse_args()

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
