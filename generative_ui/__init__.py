"""Generative UI - two-phase LLM pipeline from content to a themed UI tree"""
from generative_ui.engine.generative_ui import GenerativeUI
from generative_ui.engine.design_analysis import DesignAnalysisEngine
from generative_ui.engine.generate_layout import GenUIEngine
from generative_ui.engine.errors import (
    GenerativeUIError,
    ConfigurationError,
    MissingCredentialError,
    UnsupportedModelError,
    StageExecutionError,
    MalformedOutputError,
)
from generative_ui.engine.models import (
    ModelConfig,
    ModelsConfig,
    GenerateUIParams,
    GenerateUIResult,
    ExecutionContext,
    ExecutionPhase,
    DesignAnalysisInput,
    DesignAnalysisOutput,
    GenUIInput,
    GenUIOutput,
    ThemeColors,
    Theme,
    UIElement,
    ChainResult,
)
from generative_ui.services.llm_provider import ModelClient, create_model

__version__ = "0.1.0"

__all__ = [
    "GenerativeUI",
    "DesignAnalysisEngine",
    "GenUIEngine",
    "create_model",
    "ModelClient",
    # Errors
    "GenerativeUIError",
    "ConfigurationError",
    "MissingCredentialError",
    "UnsupportedModelError",
    "StageExecutionError",
    "MalformedOutputError",
    # Models
    "ModelConfig",
    "ModelsConfig",
    "GenerateUIParams",
    "GenerateUIResult",
    "ExecutionContext",
    "ExecutionPhase",
    "DesignAnalysisInput",
    "DesignAnalysisOutput",
    "GenUIInput",
    "GenUIOutput",
    "ThemeColors",
    "Theme",
    "UIElement",
    "ChainResult",
]
